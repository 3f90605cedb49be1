"""Unit tests for the FanoutLogger entry points."""

from __future__ import annotations

import pytest

from pslog.core.logger import caller_location
from pslog.errors import ConfigurationError
from pslog.models import Severity


def _where() -> str | None:
    return caller_location()


class TestCallerLocation:
    """caller_location must name the frame that called the entry point."""

    def test_reports_calling_frame(self):
        location = _where()
        assert location is not None
        assert "test_logger.py" in location
        assert location.endswith("(test_reports_calling_frame)")

    def test_too_deep_returns_none(self):
        """A stacklevel beyond the stack yields no location."""
        assert caller_location(10_000) is None


class TestEntryPoints:
    """Each named entry point must dispatch at its own severity."""

    @pytest.mark.parametrize(
        "method, stream",
        [("debug", "debug"), ("info", "verbose"), ("warning", "warning")],
    )
    def test_severity_named_methods(self, make_harness, method, stream):
        h = make_harness(console_severity=Severity.DEBUG)
        getattr(h.logger, method)("hello")
        assert h.console.calls[0][0] == stream

    def test_error_location_is_the_caller(self, make_harness):
        """The console error location is the line that called error()."""
        h = make_harness(console_severity=Severity.DEBUG)
        h.logger.error(["bad", "worse"])

        kind, payload, location = h.console.calls[0]
        assert (kind, payload) == ("error", "bad\nworse")
        assert "test_logger.py" in location
        assert location.endswith("(test_error_location_is_the_caller)")

    def test_log_passes_overrides(self, make_harness, tmp_path):
        """Source, event id and log file reach the dispatcher unchanged."""
        h = make_harness(event_severity=Severity.DEBUG, file_severity=Severity.DEBUG)
        h.logger.warning("x", source="svc", event_id=9, log_file=tmp_path / "a.log")
        assert h.event.calls[0][1] == "svc"
        assert h.event.calls[0][3] == 9
        assert h.file.calls[0][0] == tmp_path / "a.log"


class TestFatal:
    """fatal must terminate exactly once, after every sink, whatever happens."""

    def test_terminates_once_after_all_sinks(self, all_debug):
        """Termination is the last journal entry and happens once."""
        all_debug.logger.fatal("gone")

        assert all_debug.exit.codes == [1]
        assert [entry[0] for entry in all_debug.journal] == [
            "event", "file", "serial", "console", "exit",
        ]

    def test_custom_exit_code(self, all_debug):
        all_debug.logger.fatal("gone", exit_code=3)
        assert all_debug.exit.codes == [3]

    def test_terminates_even_with_nothing_to_log(self, all_debug):
        """Empty input still terminates."""
        all_debug.logger.fatal([])
        assert all_debug.journal == [("exit", 1)]

    def test_terminates_when_sinks_fail(self, all_debug):
        """Sink failures do not prevent termination."""
        all_debug.event.fail = True
        all_debug.file.fail = True
        all_debug.logger.fatal("gone", exit_code=4)
        assert all_debug.exit.codes == [4]

    def test_default_process_exit_raises_system_exit(self, all_debug):
        from pslog.core.logger import FanoutLogger

        logger = FanoutLogger(all_debug.dispatcher)
        with pytest.raises(SystemExit) as excinfo:
            logger.fatal("gone", exit_code=5)
        assert excinfo.value.code == 5

    def test_log_with_bad_severity_raises(self, all_debug):
        """A bad severity through log() propagates as ConfigurationError."""
        with pytest.raises(ConfigurationError):
            all_debug.logger.log("loud", "x")
