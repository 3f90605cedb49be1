"""pslog CLI — Typer-based command-line interface.

Provides the ``pslog`` command with subcommands for writing a log message
from a shell script, listing serial ports and showing effective settings.

All output uses Rich for formatted terminal display.
"""
