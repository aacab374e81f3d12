"""Review intake pipeline: validate, authenticate, classify, derive, persist."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from reviewgate.core.config import Config, get_config
from reviewgate.core.exceptions import AuthenticationError, ValidationError
from reviewgate.core.schemas import ClassificationResult
from reviewgate.core.security import verify_webhook_secret
from reviewgate.models.enums import ReviewStatus
from reviewgate.services.classification_service import ClassificationService
from reviewgate.services.moderation import derive_status
from reviewgate.services.review_service import ReviewService
from reviewgate.utils.validators import sanitize_text

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("business_id", "reviewer_name", "phone", "content")
# Over-long values are truncated to these caps, never rejected.
FIELD_LIMITS = {"business_id": 255, "reviewer_name": 255, "phone": 64, "content": 20000}


@dataclass(frozen=True)
class ReviewSubmission:
    business_id: str
    reviewer_name: str
    phone: str
    content: str


@dataclass(frozen=True)
class IntakeOutcome:
    review_id: int
    status: ReviewStatus


class ReviewIntakePipeline:
    """Run one submission through the intake stages in order.

    Validation and the secret check complete before any external call.
    Classification finishes before the single persistence attempt starts.
    """

    def __init__(
        self,
        classifier: ClassificationService,
        reviews: ReviewService,
        settings: Config | None = None,
    ) -> None:
        self.classifier = classifier
        self.reviews = reviews
        self.settings = settings or get_config()

    def validate(self, payload: Mapping[str, Any]) -> ReviewSubmission:
        values = {}
        for field in REQUIRED_FIELDS:
            raw = payload.get(field)
            values[field] = sanitize_text(raw, max_len=FIELD_LIMITS[field]) if raw is not None else ""
        missing = [field for field in REQUIRED_FIELDS if not values[field]]
        if missing:
            logger.warning(
                "review.intake.rejected",
                extra={"event": "review.intake.rejected", "reason": "missing_fields", "fields": missing},
            )
            raise ValidationError("Missing required fields")
        return ReviewSubmission(**values)

    def authenticate(self, presented_secret: str | None) -> None:
        try:
            verify_webhook_secret(presented_secret, self.settings.WEBHOOK_SECRET)
        except AuthenticationError:
            logger.warning(
                "review.intake.rejected",
                extra={"event": "review.intake.rejected", "reason": "webhook_secret_mismatch"},
            )
            raise

    def classify(self, submission: ReviewSubmission) -> ClassificationResult:
        return self.classifier.classify(submission.content)

    def persist(self, submission: ReviewSubmission, classification: ClassificationResult, status: ReviewStatus):
        return self.reviews.create_review(
            business_id=submission.business_id,
            reviewer_name=submission.reviewer_name,
            phone=submission.phone,
            content=submission.content,
            status=status,
            sentiment_score=classification.sentiment_score,
        )

    def run(self, payload: Mapping[str, Any], presented_secret: str | None = None) -> IntakeOutcome:
        submission = self.validate(payload)
        self.authenticate(presented_secret)

        classification = self.classify(submission)
        status = derive_status(classification)
        logger.info(
            "review.intake.classified",
            extra={
                "event": "review.intake.classified",
                "business_id": submission.business_id,
                "status": status.value,
            },
        )

        review = self.persist(submission, classification, status)
        return IntakeOutcome(review_id=review.id, status=status)
