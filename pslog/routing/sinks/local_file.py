"""Local file sink — appends log lines to a plain text file.

The file is opened, written and closed for every line.  A missing parent
directory is reported as ``SinkUnavailable`` rather than created.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pslog.errors import SinkUnavailable

logger = logging.getLogger(__name__)


class AppendFileSink:
    """Appends lines to log files.

    Parameters
    ----------
    encoding:
        Text encoding of the log file.  Defaults to UTF-8.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def append(self, path: Path | str, line: str) -> None:
        """Append *line* plus a newline to *path*."""
        target = Path(path)
        if not target.parent.is_dir():
            raise SinkUnavailable(
                f"cannot write to {target}: directory {target.parent} does not exist"
            )
        try:
            with target.open("a", encoding=self._encoding) as fh:
                fh.write(line + "\n")
        except OSError as exc:
            raise SinkUnavailable(f"cannot write to {target}: {exc}") from exc
        logger.debug("AppendFileSink: appended %d chars to %s", len(line), target)
