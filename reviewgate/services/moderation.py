"""Moderation status derivation from a classifier verdict."""

from __future__ import annotations

from reviewgate.core.schemas import ClassificationResult
from reviewgate.models.enums import ClassifierAction, ReviewStatus

APPROVE_BELOW_SAFETY = 0.3
FLAG_AT_OR_ABOVE_SAFETY = 0.7


def derive_status(result: ClassificationResult) -> ReviewStatus:
    """Map a verdict to exactly one status; first matching rule wins.

    1. action "allow" and safety < 0.3      -> approved
    2. action "block" or safety >= 0.7      -> flagged
    3. anything else (including "flag")     -> pending
    """
    if result.action == ClassifierAction.ALLOW.value and result.safety_score < APPROVE_BELOW_SAFETY:
        return ReviewStatus.APPROVED
    if result.action == ClassifierAction.BLOCK.value or result.safety_score >= FLAG_AT_OR_ABOVE_SAFETY:
        return ReviewStatus.FLAGGED
    return ReviewStatus.PENDING
