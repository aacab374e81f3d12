"""Review request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from reviewgate.models.enums import ReviewStatus


class ReviewSubmitRequest(BaseModel):
    """Intake body; presence and length caps are applied by the intake pipeline."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    business_id: str | None = None
    reviewer_name: str | None = None
    phone: str | None = None
    content: str | None = None


class ReviewSubmitResponse(BaseModel):
    ok: bool = True
    message: str
    status: ReviewStatus
    review_id: int


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    business_id: str
    reviewer_name: str
    phone: str
    content: str
    status: ReviewStatus
    sentiment_score: float
    is_positive: bool
    pinned: bool = False
    created_at: datetime
    updated_at: datetime | None = None


class ReviewListResponse(BaseModel):
    ok: bool = True
    reviews: list[ReviewResponse]
    count: int
