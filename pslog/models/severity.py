"""Severity, channel and event entry-type enumerations."""

from __future__ import annotations

from enum import Enum, IntEnum

from pslog.errors import ConfigurationError


class EntryType(str, Enum):
    """Event-log entry types a severity maps onto."""

    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"


class Channel(str, Enum):
    """The four output destinations a log call can fan out to."""

    CONSOLE = "console"
    EVENT_LOG = "event_log"
    FILE = "file"
    SERIAL = "serial"


class Severity(IntEnum):
    """Total-ordered log severity.  Comparison is purely numeric."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    @property
    def tag(self) -> str:
        """Short bracketed tag used as a line prefix, e.g. ``[W]``."""
        return f"[{self.name[0]}]"

    @property
    def entry_type(self) -> EntryType:
        return _ENTRY_TYPES[self]

    @classmethod
    def parse(cls, value: Severity | int | str) -> Severity:
        """Coerce a member, an integer or a case-insensitive name.

        Raises
        ------
        ConfigurationError
            If *value* does not name one of the five severities.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member
        raise ConfigurationError(f"unknown severity: {value!r}")


_ENTRY_TYPES: dict[Severity, EntryType] = {
    Severity.DEBUG: EntryType.INFORMATION,
    Severity.INFO: EntryType.INFORMATION,
    Severity.WARNING: EntryType.WARNING,
    Severity.ERROR: EntryType.ERROR,
    Severity.FATAL: EntryType.ERROR,
}
