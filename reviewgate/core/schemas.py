"""Pydantic schemas for lenient classifier output parsing."""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from pydantic import BaseModel, ConfigDict

from reviewgate.models.enums import ClassifierAction

logger = logging.getLogger(__name__)

DEFAULT_SAFETY_SCORE = 0.0
DEFAULT_SENTIMENT_SCORE = 0.0
DEFAULT_ACTION = ClassifierAction.FLAG.value


class ClassificationResult(BaseModel):
    """Fully populated classifier verdict; never partial."""

    model_config = ConfigDict(frozen=True)

    safety_score: float = DEFAULT_SAFETY_SCORE
    sentiment_score: float = DEFAULT_SENTIMENT_SCORE
    action: str = DEFAULT_ACTION


def _reject_constant(token: str) -> float:
    raise ValueError(f"non-standard JSON constant: {token}")


def _as_score(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        score = float(value)
    elif isinstance(value, str):
        try:
            score = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(score):
        return None
    return score


def _as_action(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def parse_classification(raw_text: str | None) -> ClassificationResult:
    """Parse classifier text into a result, defaulting every missing field.

    Unparseable text yields safety 0, sentiment 0 and action "flag"; the
    defaults lean toward manual moderation and never mark content as allowed.
    An "allow" verdict without a usable finite safety score is downgraded to
    "flag", so garbled output can never be auto-approved.
    """
    try:
        payload = json.loads(raw_text or "", parse_constant=_reject_constant)
    except (TypeError, ValueError):
        logger.warning(
            "classifier.output.unparseable",
            extra={"event": "classifier.output.unparseable", "raw_length": len(raw_text or "")},
        )
        payload = {}

    if not isinstance(payload, dict):
        logger.warning(
            "classifier.output.not_an_object",
            extra={"event": "classifier.output.not_an_object", "json_type": type(payload).__name__},
        )
        payload = {}

    fields: dict[str, Any] = {}
    safety = _as_score(payload.get("safety_score"))
    if safety is not None:
        fields["safety_score"] = safety
    sentiment = _as_score(payload.get("sentiment_score"))
    if sentiment is not None:
        fields["sentiment_score"] = sentiment
    action = _as_action(payload.get("action"))
    if action is not None:
        fields["action"] = action

    if safety is None and fields.get("action") == ClassifierAction.ALLOW.value:
        logger.warning(
            "classifier.output.allow_downgraded",
            extra={
                "event": "classifier.output.allow_downgraded",
                "safety_type": type(payload.get("safety_score")).__name__,
            },
        )
        fields["action"] = DEFAULT_ACTION

    missing = sorted({"safety_score", "sentiment_score", "action"} - set(fields))
    if missing:
        logger.info(
            "classifier.output.defaults_applied",
            extra={"event": "classifier.output.defaults_applied", "fields": missing},
        )
    return ClassificationResult(**fields)
