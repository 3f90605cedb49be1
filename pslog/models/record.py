"""Per-call record models.

A ``LogRecord`` is built fresh for every dispatch and discarded once the
sinks have been called.  ``ErrorRecord`` is the structured-error input a
caller may log in place of plain text.
"""

from __future__ import annotations

import re
import traceback
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pslog.models.severity import Severity

INTERACTIVE_SCRIPT = "INTERACTIVE"

_EOL = re.compile(r"\r\n|\r|\n")


class ErrorRecord(BaseModel):
    """A structured error: message, code and originating script location."""

    model_config = ConfigDict(frozen=True)

    message: str
    code: int | str = 0
    script: str | None = None  # None when raised outside any script file
    line: int = 0
    inner_message: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorRecord:
        """Build an ``ErrorRecord`` from a raised (or unraised) exception.

        The code is ``errno`` when the exception carries one, else the
        exception class name.  Script and line come from the innermost
        traceback frame.  The inner message comes from ``__cause__`` or,
        failing that, ``__context__`` unless it was suppressed with
        ``raise ... from None``.
        """
        frames = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
        code = getattr(exc, "errno", None)
        inner = exc.__cause__ or (None if exc.__suppress_context__ else exc.__context__)
        return cls(
            message=str(exc) or type(exc).__name__,
            code=code if code is not None else type(exc).__name__,
            script=frames[-1].filename if frames else None,
            line=(frames[-1].lineno or 0) if frames else 0,
            inner_message=(str(inner) or type(inner).__name__) if inner else None,
        )

    def to_line(self) -> str:
        """Render as ``[<inner>  : ]<message> {<code>, <script>:<line>}``."""
        location = f"{self.script or INTERACTIVE_SCRIPT}:{self.line}"
        text = f"{self.message} {{{self.code}, {location}}}"
        if self.inner_message:
            text = f"{self.inner_message}  : {text}"
        return _EOL.sub(" ", text)


class LogRecord(BaseModel):
    """One log call, resolved and normalized, ready for the sinks."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    hostname: str = ""
    source: str
    severity: Severity
    lines: tuple[str, ...]
    event_id: int
    log_file: Path | None = None

    @property
    def stamp(self) -> str:
        """UTC timestamp rendered as ``YYYY-MM-DDTHH:MM:SSZ``."""
        return self.timestamp.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
