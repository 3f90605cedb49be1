"""Shared test fixtures for pslog."""

from __future__ import annotations

import os
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest

from pslog.config import LogSettings
from pslog.core.logger import FanoutLogger
from pslog.errors import SinkUnavailable
from pslog.models.severity import EntryType, Severity
from pslog.routing.dispatcher import LogDispatcher

FIXED_TIME = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
HOSTNAME = "buildhost"
SERIAL_PORT = "/dev/ttyS9"


# ---------------------------------------------------------------------------
# Recording fakes — every call lands in a shared journal so tests can
# check both per-sink calls and cross-sink ordering.
# ---------------------------------------------------------------------------


class RecordingConsole:
    def __init__(self, journal: list[tuple]) -> None:
        self.journal = journal
        self.calls: list[tuple] = []

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        self.journal.append(("console", *call))

    def debug(self, line: str) -> None:
        self._record("debug", line)

    def verbose(self, line: str) -> None:
        self._record("verbose", line)

    def warning(self, line: str) -> None:
        self._record("warning", line)

    def error(self, payload: str, location: str | None = None) -> None:
        self._record("error", payload, location)


class RecordingEventSink:
    def __init__(self, journal: list[tuple], fail: bool = False) -> None:
        self.journal = journal
        self.fail = fail
        self.calls: list[tuple[str, str, EntryType, int, str]] = []

    def write(self, log_name, source, entry_type, event_id, message) -> None:
        if self.fail:
            raise SinkUnavailable("event log offline")
        self.calls.append((log_name, source, entry_type, event_id, message))
        self.journal.append(("event", message))


class RecordingFileSink:
    def __init__(self, journal: list[tuple], fail: bool = False) -> None:
        self.journal = journal
        self.fail = fail
        self.calls: list[tuple[Path, str]] = []

    def append(self, path, line) -> None:
        if self.fail:
            raise SinkUnavailable("disk full")
        self.calls.append((Path(path), line))
        self.journal.append(("file", line))


class RecordingSerialSink:
    def __init__(self, journal: list[tuple], ports: set[str] | None = None,
                 fail: bool = False) -> None:
        self.journal = journal
        self.ports = ports if ports is not None else {SERIAL_PORT}
        self.fail = fail
        self.calls: list[tuple[str, str, dict[str, Any]]] = []
        self.port_queries: list[str] = []

    def port_exists(self, port: str) -> bool:
        self.port_queries.append(port)
        return port in self.ports

    def write(self, port, data, **framing) -> None:
        if self.fail:
            raise SinkUnavailable("port busy")
        self.calls.append((port, data, framing))
        self.journal.append(("serial", data))


class RecordingExit:
    def __init__(self, journal: list[tuple]) -> None:
        self.journal = journal
        self.codes: list[int] = []

    def terminate(self, code: int) -> None:
        self.codes.append(code)
        self.journal.append(("exit", code))


class Harness:
    """A dispatcher wired to recording sinks."""

    def __init__(self, settings: LogSettings) -> None:
        self.journal: list[tuple] = []
        self.console = RecordingConsole(self.journal)
        self.event = RecordingEventSink(self.journal)
        self.file = RecordingFileSink(self.journal)
        self.serial = RecordingSerialSink(self.journal)
        self.exit = RecordingExit(self.journal)
        self.dispatcher = LogDispatcher(
            settings,
            console=self.console,
            event_sink=self.event,
            file_sink=self.file,
            serial_sink=self.serial,
            clock=lambda: FIXED_TIME,
            hostname=HOSTNAME,
        )
        self.logger = FanoutLogger(self.dispatcher, process_exit=self.exit)

    def sink_calls(self) -> dict[str, list]:
        return {
            "console": list(self.console.calls),
            "event": list(self.event.calls),
            "file": list(self.file.calls),
            "serial": [(port, data) for port, data, _ in self.serial.calls],
        }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep PSLOG_* variables and any .env file out of every test."""
    for name in list(os.environ):
        if name.startswith("PSLOG_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "run.log"


@pytest.fixture
def make_harness() -> Callable[..., Harness]:
    """Factory fixture: build a Harness with every channel disabled unless overridden."""

    def _factory(**overrides: Any) -> Harness:
        defaults: dict[str, Any] = {
            "console_severity": None,
            "event_severity": None,
            "file_severity": None,
            "serial_severity": None,
        }
        defaults.update(overrides)
        return Harness(LogSettings(**defaults))

    return _factory


@pytest.fixture
def all_debug(make_harness: Callable[..., Harness], log_path: Path) -> Harness:
    """Every channel enabled at DEBUG, with a present port and a log file."""
    return make_harness(
        console_severity=Severity.DEBUG,
        event_severity=Severity.DEBUG,
        file_severity=Severity.DEBUG,
        serial_severity=Severity.DEBUG,
        serial_port=SERIAL_PORT,
        default_log_file=log_path,
    )
