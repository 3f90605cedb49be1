"""pslog core — normalization and per-channel gating.

The caller-facing entry points live in ``pslog.core.logger``.
"""

from pslog.core.gate import should_emit
from pslog.core.normalizer import normalize_item, normalize_messages, split_lines

__all__ = ["should_emit", "normalize_item", "normalize_messages", "split_lines"]
