"""Main Typer application — imports and registers all CLI commands.

Entry point: ``pslog`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import logging

import typer

from pslog.cli.commands.ports import ports_cmd
from pslog.cli.commands.show_settings import settings_cmd
from pslog.cli.commands.write import write_cmd
from pslog.config import LogSettings

app = typer.Typer(
    name="pslog",
    help="pslog: fan a log message out to console, event log, file and serial port.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="write", help="Write a message to every enabled channel.")(write_cmd)
app.command(name="ports", help="List serial ports on this host.")(ports_cmd)
app.command(name="settings", help="Show the effective channel settings.")(settings_cmd)


@app.callback()
def _configure_logging(
    log_level: str = typer.Option(
        None, "--log-level", help="Level for pslog's own diagnostics."
    ),
) -> None:
    """Configure stdlib logging before any command runs."""
    level = (log_level or LogSettings().log_level).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
