"""Process exit collaborator used by the fatal entry point."""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger(__name__)


class SystemProcessExit:
    """Ends the process by raising ``SystemExit`` with the given code."""

    def terminate(self, code: int) -> None:
        logger.debug("Terminating with exit code %d", code)
        sys.exit(code)
