"""Per-channel severity gate."""

from __future__ import annotations

from pslog.models.severity import Severity


def should_emit(severity: Severity, minimum: Severity | None) -> bool:
    """Return True iff *minimum* is configured and *severity* reaches it.

    An unset minimum disables the channel entirely.
    """
    if minimum is None:
        return False
    return severity >= minimum
