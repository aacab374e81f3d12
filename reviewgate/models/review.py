"""Review model module."""

from __future__ import annotations

from sqlalchemy import Boolean, Enum, Float, Index, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column, validates

from reviewgate.models.base import Base, TimestampMixin
from reviewgate.models.enums import ReviewStatus


class Review(Base, TimestampMixin):
    __tablename__ = "reviews"
    __table_args__ = (
        Index("idx_reviews_business_status", "business_id", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    business_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    reviewer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[ReviewStatus] = mapped_column(
        Enum(
            ReviewStatus,
            name="review_status",
            native_enum=False,
            values_callable=lambda members: [member.value for member in members],
        ),
        default=ReviewStatus.PENDING,
        nullable=False,
    )
    sentiment_score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    is_positive: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    pinned: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false(), nullable=False)

    @validates("sentiment_score")
    def _sync_is_positive(self, key: str, value: float) -> float:
        score = float(value)
        self.is_positive = score > 0
        return score

