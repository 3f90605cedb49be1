"""Rich console sink — the last-resort channel.

Debug, verbose and warning lines are written to stderr with a stream
label, the way an interactive shell shows its auxiliary streams.  Errors
are written once, with the caller's location underneath.

Color scheme
------------
- dim          : DEBUG
- cyan         : VERBOSE
- yellow       : WARNING
- bold red     : ERROR
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


class RichConsoleSink:
    """Console streams rendered through a Rich ``Console``.

    Parameters
    ----------
    console:
        Target console.  Defaults to a new ``Console(stderr=True)``.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(stderr=True)

    def _stream(self, label: str, style: str, line: str) -> None:
        text = Text(f"{label}: ", style=style)
        text.append(line)
        self._console.print(text, soft_wrap=True, highlight=False)

    def debug(self, line: str) -> None:
        self._stream("DEBUG", "dim", line)

    def verbose(self, line: str) -> None:
        self._stream("VERBOSE", "cyan", line)

    def warning(self, line: str) -> None:
        self._stream("WARNING", "yellow", line)

    def error(self, payload: str, location: str | None = None) -> None:
        self._console.print(Text(payload, style="bold red"), soft_wrap=True, highlight=False)
        if location:
            self._console.print(Text(f"    at {location}", style="dim"), highlight=False)
