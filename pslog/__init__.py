"""pslog: fan one log call out to console, event log, file and serial port.

Each channel is gated by its own minimum severity:
  - Console: Rich-rendered debug/verbose/warning streams and error path
  - OS event log: Windows Event Log (pywin32) or syslog, one event per call
  - File: one tab-prefixed line per message line
  - Serial port: one line per message line via pyserial
  - ``fatal`` ends the process after every channel has been tried
"""

__version__ = "0.1.0"
__description__ = (
    "Severity-gated log fan-out to console, event log, file and serial port"
)

from pslog.api import configure, debug, error, fatal, get_logger, get_settings, info, warning
from pslog.config import LogSettings
from pslog.core.logger import FanoutLogger
from pslog.models import Channel, EntryType, ErrorRecord, LogRecord, Severity
from pslog.routing.dispatcher import LogDispatcher

__all__ = [
    "configure",
    "get_logger",
    "get_settings",
    "debug",
    "info",
    "warning",
    "error",
    "fatal",
    "FanoutLogger",
    "LogDispatcher",
    "LogSettings",
    "Severity",
    "Channel",
    "EntryType",
    "ErrorRecord",
    "LogRecord",
    "__version__",
]
