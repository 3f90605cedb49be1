"""Shared line formatting for the pslog channels.

Keeps the per-channel prefixes in one place so the dispatcher only
decides *whether* a channel fires, not what its lines look like.
"""

from __future__ import annotations

from pslog.models.record import LogRecord


def format_event_body(record: LogRecord) -> str:
    """Return the single event body: tag, then every line joined by newline.

    >>> from pslog.models import LogRecord, Severity
    >>> rec = LogRecord(source="s", severity=Severity.WARNING,
    ...                 lines=("a", "b"), event_id=1)
    >>> format_event_body(rec)
    '[W] a\\nb'
    """
    return f"{record.severity.tag} " + "\n".join(record.lines)


def format_file_line(record: LogRecord, text: str) -> str:
    """Tab-separated ``timestamp  hostname  source:  tag`` prefix, then *text*."""
    prefix = "\t".join(
        [record.stamp, record.hostname, f"{record.source}:", record.severity.tag]
    )
    return f"{prefix} {text}"


def format_serial_line(record: LogRecord, text: str) -> str:
    """Space-separated ``timestamp source: tag text``."""
    return " ".join([record.stamp, f"{record.source}:", record.severity.tag, text])


def format_console_line(record: LogRecord, text: str) -> str:
    return f"{record.stamp} {text}"


def format_console_payload(record: LogRecord) -> str:
    """All lines joined into the one payload handed to the error path."""
    return "\n".join(record.lines)
