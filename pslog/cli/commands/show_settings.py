"""``pslog settings`` — show channel thresholds and defaults.

Settings come from PSLOG_* environment variables and ``.env``.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from pslog.config import LogSettings
from pslog.models.severity import Channel

console = Console()


def settings_cmd() -> None:
    """Show the effective settings for every channel."""
    settings = LogSettings()

    table = Table(title="Channels")
    table.add_column("Channel", style="cyan")
    table.add_column("Minimum severity")
    for channel in Channel:
        minimum = settings.threshold(channel)
        shown = minimum.name if minimum is not None else "[dim]disabled[/dim]"
        table.add_row(channel.value, shown)
    console.print(table)

    defaults = Table(title="Defaults")
    defaults.add_column("Setting", style="cyan")
    defaults.add_column("Value")
    defaults.add_row("source", settings.default_source)
    defaults.add_row("log file", str(settings.default_log_file or "-"))
    defaults.add_row("event log", settings.event_log_name)
    defaults.add_row("event id", str(settings.default_event_id))
    defaults.add_row("serial port", settings.serial_port or "-")
    defaults.add_row(
        "serial framing",
        f"{settings.serial_baudrate} {settings.serial_bytesize}"
        f"{settings.serial_parity}{settings.serial_stopbits:g}",
    )
    console.print(defaults)
