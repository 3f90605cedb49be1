"""Sink protocols for pslog routing.

Each channel hands its formatted output to one collaborator.  The
dispatcher only depends on these protocols; the concrete platform
implementations live in the sibling modules and tests substitute
recording fakes.

Sinks signal failure by raising a ``pslog.errors.SinkError``.  The
dispatcher downgrades those to a console warning; the console sink
itself is never downgraded further.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from pslog.models.severity import EntryType


@runtime_checkable
class EventSink(Protocol):
    """Writes one entry to the OS event log."""

    def write(
        self,
        log_name: str,
        source: str,
        entry_type: EntryType,
        event_id: int,
        message: str,
    ) -> None:
        """Write an entry, creating *source* once and retrying if missing."""
        ...


@runtime_checkable
class FileSink(Protocol):
    """Appends single lines to a text file."""

    def append(self, path: Path, line: str) -> None:
        """Append *line* to *path*, creating the file if absent."""
        ...


@runtime_checkable
class SerialSink(Protocol):
    """Writes single lines to a named serial port."""

    def write(
        self,
        port: str,
        data: str,
        *,
        baudrate: int = 9600,
        parity: str = "N",
        bytesize: int = 8,
        stopbits: float = 1,
        wait: bool = False,
    ) -> str | None:
        """Open *port*, write *data* as one line, optionally read one reply."""
        ...

    def port_exists(self, port: str) -> bool:
        """Return True if *port* is present on this host."""
        ...


@runtime_checkable
class ConsoleSink(Protocol):
    """Severity-mapped console streams plus the error-reporting path."""

    def debug(self, line: str) -> None: ...

    def verbose(self, line: str) -> None: ...

    def warning(self, line: str) -> None: ...

    def error(self, payload: str, location: str | None = None) -> None:
        """Report an error once, with the caller's location if known."""
        ...


@runtime_checkable
class ProcessExit(Protocol):
    """Ends the running process."""

    def terminate(self, code: int) -> None: ...


__all__ = ["EventSink", "FileSink", "SerialSink", "ConsoleSink", "ProcessExit"]
