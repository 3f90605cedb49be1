"""FanoutLogger — the five caller-facing entry points.

Each entry point fixes the severity, records where it was called from and
hands everything to a ``LogDispatcher``.  ``fatal`` additionally ends the
process once every channel has been attempted.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pslog.models.severity import Severity

if TYPE_CHECKING:
    from pslog.routing.dispatcher import LogDispatcher
    from pslog.routing.sinks import ProcessExit

logger = logging.getLogger(__name__)


def caller_location(stacklevel: int = 1) -> str | None:
    """Describe the frame *stacklevel* levels above the caller.

    Returns ``"<file>:<line> (<function>)"`` or None if the stack is not
    that deep.  ``stacklevel=1`` is the function calling this one's caller,
    matching the stdlib ``logging`` convention.
    """
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        return None
    code = frame.f_code
    return f"{code.co_filename}:{frame.f_lineno} ({code.co_name})"


class FanoutLogger:
    """Severity-named entry points over a ``LogDispatcher``.

    Parameters
    ----------
    dispatcher:
        The dispatcher every call is routed through.
    process_exit:
        Collaborator used by ``fatal``.  Defaults to ``SystemProcessExit``.
    """

    def __init__(
        self,
        dispatcher: LogDispatcher,
        process_exit: ProcessExit | None = None,
    ) -> None:
        if process_exit is None:
            from pslog.routing.sinks.process import SystemProcessExit

            process_exit = SystemProcessExit()
        self.dispatcher = dispatcher
        self._process_exit = process_exit

    def log(
        self,
        severity: Severity | int | str,
        messages: Any,
        source: str | None = None,
        event_id: int | None = None,
        log_file: Path | str | None = None,
        *,
        stacklevel: int = 1,
    ) -> None:
        self.dispatcher.dispatch(
            messages,
            severity,
            source=source,
            event_id=event_id,
            log_file=log_file,
            location=caller_location(stacklevel),
        )

    def debug(self, messages: Any, source: str | None = None,
              event_id: int | None = None, log_file: Path | str | None = None,
              *, stacklevel: int = 1) -> None:
        self.log(Severity.DEBUG, messages, source, event_id, log_file,
                 stacklevel=stacklevel + 1)

    def info(self, messages: Any, source: str | None = None,
             event_id: int | None = None, log_file: Path | str | None = None,
             *, stacklevel: int = 1) -> None:
        self.log(Severity.INFO, messages, source, event_id, log_file,
                 stacklevel=stacklevel + 1)

    def warning(self, messages: Any, source: str | None = None,
                event_id: int | None = None, log_file: Path | str | None = None,
                *, stacklevel: int = 1) -> None:
        self.log(Severity.WARNING, messages, source, event_id, log_file,
                 stacklevel=stacklevel + 1)

    def error(self, messages: Any, source: str | None = None,
              event_id: int | None = None, log_file: Path | str | None = None,
              *, stacklevel: int = 1) -> None:
        self.log(Severity.ERROR, messages, source, event_id, log_file,
                 stacklevel=stacklevel + 1)

    def fatal(self, messages: Any, source: str | None = None,
              event_id: int | None = None, log_file: Path | str | None = None,
              exit_code: int = 1, *, stacklevel: int = 1) -> None:
        """Log at FATAL, then terminate the process with *exit_code*.

        Termination happens exactly once, after every channel has been
        attempted, and even if dispatch itself raised.
        """
        try:
            self.log(Severity.FATAL, messages, source, event_id, log_file,
                     stacklevel=stacklevel + 1)
        finally:
            logger.debug("Fatal entry point terminating with code %d", exit_code)
            self._process_exit.terminate(exit_code)
