"""OS event-log sinks — Windows Event Log and syslog backends.

Both backends share ``EventLogSink.write``: when the backend reports the
source as unregistered, the sink creates it once and retries once.  A
refused creation surfaces as ``PermissionDenied``; everything else as
``SinkUnavailable``.

Platform modules (``syslog``, ``winreg``, pywin32) are imported inside the
methods that need them so this module imports on every platform.
"""

from __future__ import annotations

import logging
import sys

from pslog.errors import EventSourceMissing, PermissionDenied, SinkUnavailable
from pslog.models.severity import EntryType

logger = logging.getLogger(__name__)

_ERROR_ACCESS_DENIED = 5


class EventLogSink:
    """Base class for event-log backends.

    Subclasses implement ``_report`` (raising ``EventSourceMissing`` when
    the source is not registered) and ``create_source``.
    """

    def write(
        self,
        log_name: str,
        source: str,
        entry_type: EntryType,
        event_id: int,
        message: str,
    ) -> None:
        try:
            self._report(log_name, source, entry_type, event_id, message)
            return
        except EventSourceMissing:
            logger.info(
                "Event source %r not registered in %r; creating it", source, log_name
            )
        self.create_source(log_name, source)
        self._report(log_name, source, entry_type, event_id, message)

    def _report(
        self,
        log_name: str,
        source: str,
        entry_type: EntryType,
        event_id: int,
        message: str,
    ) -> None:
        raise NotImplementedError

    def create_source(self, log_name: str, source: str) -> None:
        raise NotImplementedError


class SyslogEventLog(EventLogSink):
    """Writes events to the local syslog daemon.

    The source becomes the syslog ident; the event id and log name are
    carried in the message prefix.  Syslog has no source registry, so
    ``create_source`` is a no-op.

    Parameters
    ----------
    facility:
        Syslog facility constant.  Defaults to ``syslog.LOG_USER``.
    """

    _PRIORITIES: dict[EntryType, str] = {
        EntryType.INFORMATION: "LOG_INFO",
        EntryType.WARNING: "LOG_WARNING",
        EntryType.ERROR: "LOG_ERR",
    }

    def __init__(self, facility: int | None = None) -> None:
        self._facility = facility

    def _report(
        self,
        log_name: str,
        source: str,
        entry_type: EntryType,
        event_id: int,
        message: str,
    ) -> None:
        import syslog

        facility = self._facility if self._facility is not None else syslog.LOG_USER
        priority = getattr(syslog, self._PRIORITIES[entry_type])
        try:
            syslog.openlog(ident=source, logoption=syslog.LOG_PID, facility=facility)
            try:
                syslog.syslog(priority, f"{log_name}[{event_id}]: {message}")
            finally:
                syslog.closelog()
        except OSError as exc:
            raise SinkUnavailable(f"syslog write failed: {exc}") from exc
        logger.debug("SyslogEventLog: wrote event %d for %s", event_id, source)

    def create_source(self, log_name: str, source: str) -> None:
        logger.debug("SyslogEventLog: no registration needed for %s", source)


class WindowsEventLog(EventLogSink):
    """Writes events to the Windows Event Log through pywin32.

    A source is considered registered when its key exists under
    ``HKLM\\SYSTEM\\CurrentControlSet\\Services\\EventLog\\<log>``.
    Registering a new source needs administrator rights.
    """

    _EVENT_TYPES: dict[EntryType, str] = {
        EntryType.INFORMATION: "EVENTLOG_INFORMATION_TYPE",
        EntryType.WARNING: "EVENTLOG_WARNING_TYPE",
        EntryType.ERROR: "EVENTLOG_ERROR_TYPE",
    }

    @staticmethod
    def source_registered(log_name: str, source: str) -> bool:
        import winreg

        key = rf"SYSTEM\CurrentControlSet\Services\EventLog\{log_name}\{source}"
        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key):
                return True
        except FileNotFoundError:
            return False

    def _report(
        self,
        log_name: str,
        source: str,
        entry_type: EntryType,
        event_id: int,
        message: str,
    ) -> None:
        import pywintypes
        import win32evtlog
        import win32evtlogutil

        if not self.source_registered(log_name, source):
            raise EventSourceMissing(f"{source!r} is not registered in {log_name!r}")
        try:
            win32evtlogutil.ReportEvent(
                source,
                event_id,
                eventType=getattr(win32evtlog, self._EVENT_TYPES[entry_type]),
                strings=[message],
            )
        except pywintypes.error as exc:
            raise SinkUnavailable(f"ReportEvent failed: {exc}") from exc

    def create_source(self, log_name: str, source: str) -> None:
        import pywintypes
        import win32evtlogutil

        try:
            win32evtlogutil.AddSourceToRegistry(source, eventLogType=log_name)
        except pywintypes.error as exc:
            if exc.winerror == _ERROR_ACCESS_DENIED:
                raise PermissionDenied(
                    f"cannot create event source {source!r} in {log_name!r}: "
                    "administrator rights required"
                ) from exc
            raise SinkUnavailable(f"AddSourceToRegistry failed: {exc}") from exc
        logger.info("Registered event source %r in %r", source, log_name)


def default_event_sink() -> EventLogSink:
    """Return the event-log backend for the running platform."""
    if sys.platform == "win32":
        return WindowsEventLog()
    return SyslogEventLog()
