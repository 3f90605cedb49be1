"""pslog data models — enumerations plus frozen Pydantic v2 records."""

from pslog.models.record import INTERACTIVE_SCRIPT, ErrorRecord, LogRecord
from pslog.models.severity import Channel, EntryType, Severity

__all__ = [
    # severity
    "Severity",
    "Channel",
    "EntryType",
    # records
    "ErrorRecord",
    "LogRecord",
    "INTERACTIVE_SCRIPT",
]
