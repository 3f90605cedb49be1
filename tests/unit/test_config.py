"""Tests for LogSettings — env-driven channel thresholds and defaults."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pslog.config import LogSettings
from pslog.models import Channel, Severity


class TestLogSettings:
    """LogSettings must read PSLOG_ env vars and .env, and normalize severities."""

    def test_defaults(self):
        """Built-in thresholds and defaults without any environment."""
        settings = LogSettings()
        assert settings.console_severity is Severity.INFO
        assert settings.event_severity is Severity.WARNING
        assert settings.file_severity is Severity.WARNING
        assert settings.serial_severity is None
        assert settings.default_source == "ps_log"
        assert settings.default_log_file is None
        assert settings.serial_port is None
        assert settings.event_log_name == "Application"

    def test_default_serial_framing(self):
        settings = LogSettings()
        assert settings.serial_baudrate == 9600
        assert settings.serial_parity == "N"
        assert settings.serial_bytesize == 8
        assert settings.serial_stopbits == 1

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch):
        """PSLOG_ variables override every default."""
        monkeypatch.setenv("PSLOG_CONSOLE_SEVERITY", "debug")
        monkeypatch.setenv("PSLOG_SERIAL_SEVERITY", "Error")
        monkeypatch.setenv("PSLOG_SERIAL_PORT", "COM3")
        monkeypatch.setenv("PSLOG_DEFAULT_LOG_FILE", "/var/log/x.log")
        settings = LogSettings()
        assert settings.console_severity is Severity.DEBUG
        assert settings.serial_severity is Severity.ERROR
        assert settings.serial_port == "COM3"
        assert settings.default_log_file == Path("/var/log/x.log")

    @pytest.mark.parametrize("token", ["", "none", "OFF", "disabled"])
    def test_disable_tokens(self, monkeypatch: pytest.MonkeyPatch, token):
        """Blank and none-like tokens disable a channel."""
        monkeypatch.setenv("PSLOG_EVENT_SEVERITY", token)
        assert LogSettings().event_severity is None

    def test_dotenv_file(self, tmp_path: Path):
        """A .env file in the working directory is read."""
        (tmp_path / ".env").write_text("PSLOG_DEFAULT_SOURCE=from-dotenv\n")
        assert LogSettings().default_source == "from-dotenv"

    def test_int_severity(self):
        assert LogSettings(file_severity=3).file_severity is Severity.ERROR

    def test_unknown_severity_rejected(self):
        """An unknown severity fails validation."""
        with pytest.raises(ValidationError, match="unknown severity"):
            LogSettings(console_severity="chatty")

    def test_threshold_lookup(self):
        settings = LogSettings(serial_severity="fatal")
        assert settings.threshold(Channel.CONSOLE) is Severity.INFO
        assert settings.threshold(Channel.EVENT_LOG) is Severity.WARNING
        assert settings.threshold(Channel.FILE) is Severity.WARNING
        assert settings.threshold(Channel.SERIAL) is Severity.FATAL
