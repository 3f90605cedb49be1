"""Module-level entry points over a process-wide ``FanoutLogger``.

Call ``configure()`` once at startup (or rely on PSLOG_* environment
variables) and then use the module functions::

    import pslog

    pslog.configure(console_severity="debug", default_log_file="deploy.log")
    pslog.info("copying files")
    pslog.error(exc, source="deploy", event_id=42)
    pslog.fatal("cannot continue", exit_code=3)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pslog.config import LogSettings
from pslog.core.logger import FanoutLogger
from pslog.routing.dispatcher import LogDispatcher
from pslog.routing.sinks.console import RichConsoleSink
from pslog.routing.sinks.event_log import default_event_sink
from pslog.routing.sinks.local_file import AppendFileSink
from pslog.routing.sinks.serial_port import SerialPortSink

_logger: FanoutLogger | None = None


def build_logger(settings: LogSettings | None = None) -> FanoutLogger:
    """Build a ``FanoutLogger`` wired to the platform sinks."""
    dispatcher = LogDispatcher(
        settings if settings is not None else LogSettings(),
        console=RichConsoleSink(),
        event_sink=default_event_sink(),
        file_sink=AppendFileSink(),
        serial_sink=SerialPortSink(),
    )
    return FanoutLogger(dispatcher)


def configure(settings: LogSettings | None = None, **overrides: Any) -> FanoutLogger:
    """Replace the process-wide settings and rebuild the default logger.

    Keyword overrides are applied on top of *settings* (or, when omitted,
    on top of the environment-derived defaults).
    """
    global _logger
    if settings is None:
        settings = LogSettings(**overrides)
    elif overrides:
        settings = LogSettings(**{**settings.model_dump(), **overrides})
    _logger = build_logger(settings)
    return _logger


def get_logger() -> FanoutLogger:
    """Return the process-wide logger, building a default one if needed."""
    global _logger
    if _logger is None:
        _logger = build_logger()
    return _logger


def get_settings() -> LogSettings:
    return get_logger().dispatcher.settings


def debug(messages: Any, source: str | None = None, event_id: int | None = None,
          log_file: Path | str | None = None) -> None:
    get_logger().debug(messages, source, event_id, log_file, stacklevel=2)


def info(messages: Any, source: str | None = None, event_id: int | None = None,
         log_file: Path | str | None = None) -> None:
    get_logger().info(messages, source, event_id, log_file, stacklevel=2)


def warning(messages: Any, source: str | None = None, event_id: int | None = None,
            log_file: Path | str | None = None) -> None:
    get_logger().warning(messages, source, event_id, log_file, stacklevel=2)


def error(messages: Any, source: str | None = None, event_id: int | None = None,
          log_file: Path | str | None = None) -> None:
    get_logger().error(messages, source, event_id, log_file, stacklevel=2)


def fatal(messages: Any, source: str | None = None, event_id: int | None = None,
          log_file: Path | str | None = None, exit_code: int = 1) -> None:
    """Log at FATAL on every enabled channel, then exit with *exit_code*."""
    get_logger().fatal(messages, source, event_id, log_file, exit_code, stacklevel=2)
