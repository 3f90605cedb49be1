"""LogDispatcher — fans one log call out to the four channels.

Each call is a linear pipeline: normalize the messages, resolve the
effective configuration, then gate, format and emit for the event
log, file, serial and console channels in that order.  A failure in the
event-log, file or serial sink is logged and downgraded to a console
warning; it never stops the remaining channels.
"""

from __future__ import annotations

import logging
import socket
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pslog.config import FALLBACK_SOURCE, LogSettings
from pslog.core.gate import should_emit
from pslog.core.normalizer import normalize_messages
from pslog.models.record import LogRecord
from pslog.models.severity import Channel, Severity
from pslog.routing.sinks import ConsoleSink, EventSink, FileSink, SerialSink
from pslog.routing.sinks._formatting import (
    format_console_line,
    format_console_payload,
    format_event_body,
    format_file_line,
    format_serial_line,
)

logger = logging.getLogger(__name__)


class LogDispatcher:
    """Routes normalized log lines to every channel whose gate passes.

    The dispatcher holds references to its settings and sinks but no
    per-call state; two identical calls produce two identical sets of
    sink calls.

    Parameters
    ----------
    settings:
        Channel thresholds and defaults, read at every dispatch.
    console:
        The console sink.  Always present.
    event_sink, file_sink, serial_sink:
        Optional sinks.  A missing sink disables its channel.
    clock:
        Returns the current UTC time.  Overridable for tests.
    hostname:
        Host name written into file lines.  Defaults to ``socket.gethostname()``.

    Usage
    -----
    >>> dispatcher = LogDispatcher(settings, console=RichConsoleSink())
    >>> dispatcher.dispatch(["deploy started"], Severity.INFO)
    """

    def __init__(
        self,
        settings: LogSettings,
        *,
        console: ConsoleSink,
        event_sink: EventSink | None = None,
        file_sink: FileSink | None = None,
        serial_sink: SerialSink | None = None,
        clock: Callable[[], datetime] | None = None,
        hostname: str | None = None,
    ) -> None:
        self.settings = settings
        self._console = console
        self._event_sink = event_sink
        self._file_sink = file_sink
        self._serial_sink = serial_sink
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._hostname = hostname if hostname is not None else socket.gethostname()

    # ------------------------------------------------------------------
    # Configuration resolution
    # ------------------------------------------------------------------

    def resolve_source(self, source: str | None) -> str:
        return source or self.settings.default_source or FALLBACK_SOURCE

    def resolve_log_file(self, log_file: Path | str | None) -> Path | None:
        if log_file:
            return Path(log_file)
        return self.settings.default_log_file

    def resolve_serial_port(self) -> str | None:
        """Return the configured serial port if the channel can fire at all.

        The channel is skipped when its threshold is unset, when no port is
        named, or when the named port is not present on this host.
        """
        if self.settings.serial_severity is None or self._serial_sink is None:
            return None
        port = self.settings.serial_port
        if not port:
            return None
        try:
            present = self._serial_sink.port_exists(port)
        except Exception as exc:  # noqa: BLE001
            logger.error("Cannot enumerate serial ports: %s", exc)
            self._console.warning(f"Cannot enumerate serial ports: {exc}")
            return None
        if not present:
            logger.debug("Serial port %s not present; serial channel skipped", port)
            return None
        return port

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(
        self,
        messages: Any,
        severity: Severity | int | str,
        *,
        source: str | None = None,
        event_id: int | None = None,
        log_file: Path | str | None = None,
        location: str | None = None,
    ) -> None:
        """Emit *messages* at *severity* to every channel whose gate passes.

        Raises
        ------
        ConfigurationError
            If *severity* is not one of the five known severities.  Nothing
            is emitted in that case.
        """
        level = Severity.parse(severity)
        settings = self.settings

        lines = tuple(normalize_messages(messages))
        if not lines:
            return

        resolved_source = self.resolve_source(source)
        resolved_file = self.resolve_log_file(log_file)
        serial_port = self.resolve_serial_port()

        record = LogRecord(
            timestamp=self._clock(),
            hostname=self._hostname,
            source=resolved_source,
            severity=level,
            lines=lines,
            event_id=event_id if event_id is not None else settings.default_event_id,
            log_file=resolved_file,
        )

        if self._event_sink is not None and should_emit(
            level, settings.threshold(Channel.EVENT_LOG)
        ):
            self._emit_event(record)

        if (
            self._file_sink is not None
            and record.log_file is not None
            and should_emit(level, settings.threshold(Channel.FILE))
        ):
            self._emit_file(record)

        if serial_port is not None and should_emit(
            level, settings.threshold(Channel.SERIAL)
        ):
            self._emit_serial(record, serial_port)

        if should_emit(level, settings.threshold(Channel.CONSOLE)):
            self._emit_console(record, location)

    # ------------------------------------------------------------------
    # Channels
    # ------------------------------------------------------------------

    def _downgrade(self, channel: Channel, exc: Exception) -> None:
        logger.error("Channel %s failed: %s", channel.value, exc)
        self._console.warning(f"{channel.value} sink failed: {exc}")

    def _emit_event(self, record: LogRecord) -> None:
        try:
            self._event_sink.write(
                self.settings.event_log_name,
                record.source,
                record.severity.entry_type,
                record.event_id,
                format_event_body(record),
            )
        except Exception as exc:  # noqa: BLE001
            self._downgrade(Channel.EVENT_LOG, exc)

    def _emit_file(self, record: LogRecord) -> None:
        try:
            for text in record.lines:
                self._file_sink.append(record.log_file, format_file_line(record, text))
        except Exception as exc:  # noqa: BLE001
            self._downgrade(Channel.FILE, exc)

    def _emit_serial(self, record: LogRecord, port: str) -> None:
        settings = self.settings
        try:
            for text in record.lines:
                self._serial_sink.write(
                    port,
                    format_serial_line(record, text),
                    baudrate=settings.serial_baudrate,
                    parity=settings.serial_parity,
                    bytesize=settings.serial_bytesize,
                    stopbits=settings.serial_stopbits,
                )
        except Exception as exc:  # noqa: BLE001
            self._downgrade(Channel.SERIAL, exc)

    def _emit_console(self, record: LogRecord, location: str | None) -> None:
        severity = record.severity
        if severity >= Severity.ERROR:
            self._console.error(format_console_payload(record), location)
            return

        stream = {
            Severity.DEBUG: self._console.debug,
            Severity.INFO: self._console.verbose,
            Severity.WARNING: self._console.warning,
        }[severity]
        for text in record.lines:
            stream(format_console_line(record, text))
