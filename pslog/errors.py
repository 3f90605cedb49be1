"""Error taxonomy for pslog.

Only ``ConfigurationError`` is allowed to abort a dispatch.  Every
``SinkError`` raised by an event-log, file or serial sink is caught by the
dispatcher and downgraded to a console warning.
"""

from __future__ import annotations


class PslogError(Exception):
    """Base class for all pslog errors."""


class ConfigurationError(PslogError, ValueError):
    """Raised for an unrecognised severity or an invalid setting.

    This is fatal for the current dispatch: nothing is emitted.
    """


class SinkError(PslogError):
    """Base class for failures raised by a sink."""


class SinkUnavailable(SinkError):
    """Raised when a sink could not write (missing directory, busy port, ...)."""


class PermissionDenied(SinkError):
    """Raised when an event source could not be created for lack of rights."""


class EventSourceMissing(SinkError):
    """Raised by an event-log backend when the named source is not registered.

    ``EventLogSink.write`` catches this once, creates the source and retries.
    """
