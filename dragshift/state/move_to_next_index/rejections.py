"""Logged rejection of move requests."""

from __future__ import annotations

import logging

from dragshift.api.moves import Rejected, RejectionReason

logger = logging.getLogger(__name__)

# out-of-bounds requests are routine at either end of a list
_LEVELS: dict[RejectionReason, int] = {
    RejectionReason.OUT_OF_BOUNDS: logging.DEBUG,
}


def rejection_level(reason: RejectionReason) -> int:
    """Return the logging level a rejection for `reason` is reported at."""
    return _LEVELS.get(reason, logging.ERROR)


def reject(reason: RejectionReason, message: str) -> Rejected:
    """Log and return a rejection; callers ignore the move and keep their state."""
    logger.log(rejection_level(reason), "move_rejected reason=%s detail=%s", reason.value, message)
    return Rejected(reason=reason, message=message)
