"""``pslog write`` — log a message from a shell script.

Every MESSAGE argument may contain embedded newlines; each resulting line
is written separately to the file and serial channels.  ``--severity
fatal`` exits with ``--exit-code`` after all channels have been tried.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from pslog import api
from pslog.errors import ConfigurationError
from pslog.models.severity import Severity

console = Console(stderr=True)


def write_cmd(
    messages: list[str] = typer.Argument(..., help="Message text, one or more."),
    severity: str = typer.Option(
        "info",
        "--severity",
        "-s",
        help="debug, info, warning, error or fatal.",
    ),
    source: str = typer.Option(None, "--source", help="Source name for this call."),
    event_id: int = typer.Option(None, "--event-id", "-e", help="Event identifier."),
    log_file: Path = typer.Option(None, "--log-file", "-f", help="Log file to append to."),
    exit_code: int = typer.Option(
        1, "--exit-code", help="Process exit code used with --severity fatal."
    ),
) -> None:
    """Write MESSAGES at SEVERITY to every channel whose threshold it meets."""
    try:
        level = Severity.parse(severity)
    except ConfigurationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    logger = api.get_logger()
    if level is Severity.FATAL:
        logger.fatal(messages, source, event_id, log_file, exit_code)
    else:
        logger.log(level, messages, source, event_id, log_file)
