"""Process-wide configuration — env-driven defaults for every channel.

Centralized config using pydantic-settings.  Reads from a .env file and
PSLOG_* environment variables.  The dispatcher is handed a ``LogSettings``
instance explicitly and reads it at every dispatch, so replacing the
settings (see ``pslog.api.configure``) takes effect on the next call.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pslog.models.severity import Channel, Severity

FALLBACK_SOURCE = "ps_log"

_DISABLED_TOKENS = {"", "none", "null", "off", "disabled"}


class LogSettings(BaseSettings):
    """Channel thresholds and sink defaults with environment overrides.

    Examples
    --------
    Override via environment::

        export PSLOG_CONSOLE_SEVERITY=debug
        export PSLOG_SERIAL_SEVERITY=warning
        export PSLOG_SERIAL_PORT=/dev/ttyUSB0
        export PSLOG_DEFAULT_LOG_FILE=/var/log/deploy.log

    A channel whose severity is unset (``none``) never fires.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PSLOG_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Channel thresholds
    console_severity: Severity | None = Severity.INFO
    event_severity: Severity | None = Severity.WARNING
    file_severity: Severity | None = Severity.WARNING
    serial_severity: Severity | None = None

    # Defaults applied when a call does not override them
    default_source: str = FALLBACK_SOURCE
    default_log_file: Path | None = None
    default_event_id: int = 1

    # Event log
    event_log_name: str = "Application"

    # Serial port
    serial_port: str | None = None
    serial_baudrate: int = 9600
    serial_parity: str = "N"
    serial_bytesize: int = 8
    serial_stopbits: float = 1

    # pslog's own diagnostics (stdlib logging)
    log_level: str = "WARNING"

    @field_validator(
        "console_severity",
        "event_severity",
        "file_severity",
        "serial_severity",
        mode="before",
    )
    @classmethod
    def _parse_severity(cls, value: Any) -> Severity | None:
        if value is None:
            return None
        if isinstance(value, str) and value.strip().lower() in _DISABLED_TOKENS:
            return None
        return Severity.parse(value)

    @field_validator("default_log_file", "serial_port", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def threshold(self, channel: Channel) -> Severity | None:
        """Return the configured minimum severity for *channel*."""
        return {
            Channel.CONSOLE: self.console_severity,
            Channel.EVENT_LOG: self.event_severity,
            Channel.FILE: self.file_severity,
            Channel.SERIAL: self.serial_severity,
        }[channel]
