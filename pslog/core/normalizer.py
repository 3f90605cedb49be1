"""Message normalization — heterogeneous inputs to single-line strings.

Accepted inputs form a closed union:

- ``str``: split on every EOL convention, empty lines preserved
- ``ErrorRecord`` or any ``BaseException``: one line, see
  ``ErrorRecord.to_line``

Anything else is converted with ``str()``; if that raises, a placeholder
naming the type is produced instead.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from typing import Any

from pslog.models.record import ErrorRecord

logger = logging.getLogger(__name__)

_EOL = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\r\\n``, ``\\n`` or ``\\r``, keeping empty lines.

    >>> split_lines("a\\r\\n\\nb")
    ['a', '', 'b']
    """
    return _EOL.split(text)


def _as_items(messages: Any) -> Iterable[Any]:
    if messages is None:
        return ()
    if isinstance(messages, (str, bytes, ErrorRecord, BaseException)):
        return (messages,)
    if isinstance(messages, Iterable):
        return messages
    return (messages,)


def normalize_item(item: Any) -> list[str]:
    """Normalize one input item into its lines."""
    if isinstance(item, str):
        return split_lines(item)
    if isinstance(item, ErrorRecord):
        return [item.to_line()]
    if isinstance(item, BaseException):
        return [ErrorRecord.from_exception(item).to_line()]
    try:
        text = item.decode(errors="replace") if isinstance(item, bytes) else str(item)
    except Exception:  # noqa: BLE001
        logger.debug("Cannot convert %s to text", type(item).__name__, exc_info=True)
        return [f"<unconvertible {type(item).__name__}>"]
    return split_lines(text)


def normalize_messages(messages: Any) -> Iterator[str]:
    """Yield the normalized lines of *messages*, in order.

    *messages* may be ``None``, a single item, or an iterable of items.
    ``None`` items and items that are exactly empty (``""``) carry no
    content and are skipped.  Empty lines inside a multi-line string are
    kept.  The generator makes a single pass over the input.
    """
    for item in _as_items(messages):
        if item is None or (isinstance(item, (str, bytes)) and not item):
            continue
        yield from normalize_item(item)
