"""Review persistence and display retrieval."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from reviewgate.core.exceptions import PersistenceError, ValidationError
from reviewgate.models.enums import ReviewStatus
from reviewgate.models.review import Review
from reviewgate.services.base_service import BaseService
from reviewgate.services.ordering import order_for_session, parse_review_id

logger = logging.getLogger(__name__)


def _datastore_message(exc: SQLAlchemyError) -> str:
    original = getattr(exc, "orig", None)
    return str(original) if original is not None else str(exc)


class ReviewService(BaseService):
    """Single-attempt reads and writes against the `reviews` table."""

    def create_review(
        self,
        business_id: str,
        reviewer_name: str,
        phone: str,
        content: str,
        status: ReviewStatus,
        sentiment_score: float,
    ) -> Review:
        review = Review(
            business_id=business_id,
            reviewer_name=reviewer_name,
            phone=phone,
            content=content,
            status=status,
            sentiment_score=sentiment_score,
        )
        try:
            self.db.add(review)
            self.commit()
            self.db.refresh(review)
        except SQLAlchemyError as exc:
            logger.exception(
                "review.persist.failed",
                extra={"event": "review.persist.failed", "business_id": business_id},
            )
            raise PersistenceError(_datastore_message(exc)) from exc

        logger.info(
            "review.persist.created",
            extra={
                "event": "review.persist.created",
                "review_id": review.id,
                "business_id": business_id,
                "status": review.status.value,
            },
        )
        return review

    def list_approved(self, business_id: str) -> list[Review]:
        """Approved reviews for a business: pinned first, then newest first."""
        statement = (
            select(Review)
            .where(Review.business_id == business_id, Review.status == ReviewStatus.APPROVED)
            .order_by(Review.pinned.desc(), Review.created_at.desc(), Review.id.desc())
        )
        try:
            return list(self.db.scalars(statement).all())
        except SQLAlchemyError as exc:
            logger.exception(
                "review.fetch.failed",
                extra={"event": "review.fetch.failed", "business_id": business_id},
            )
            raise PersistenceError(_datastore_message(exc)) from exc

    def list_for_display(self, business_id: str | None, new_review_id: str | int | None = None) -> list[Review]:
        if not business_id or not business_id.strip():
            raise ValidationError("business_id is required")

        reviews = self.list_approved(business_id)
        highlighted_id = parse_review_id(new_review_id)
        ordered = order_for_session(reviews, highlighted_id)
        logger.info(
            "review.fetch.ordered",
            extra={
                "event": "review.fetch.ordered",
                "business_id": business_id,
                "count": len(ordered),
                "new_review_id": highlighted_id,
                "session_override": bool(ordered) and highlighted_id is not None and ordered[0].id == highlighted_id,
            },
        )
        return ordered
