"""Review intake and display endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Query

from reviewgate.core.dependencies import get_intake_pipeline, get_review_service
from reviewgate.core.security import WEBHOOK_SECRET_HEADER
from reviewgate.schemas.common import ErrorEnvelope
from reviewgate.schemas.reviews import (
    ReviewListResponse,
    ReviewResponse,
    ReviewSubmitRequest,
    ReviewSubmitResponse,
)
from reviewgate.services.intake_service import ReviewIntakePipeline
from reviewgate.services.review_service import ReviewService

router = APIRouter(tags=["reviews"])

SUBMIT_ACK_MESSAGE = "Review received successfully."

SUBMIT_ERRORS = {code: {"model": ErrorEnvelope} for code in (400, 401, 405, 500)}
LIST_ERRORS = {code: {"model": ErrorEnvelope} for code in (400, 405, 500)}


@router.post("/reviews/submit", response_model=ReviewSubmitResponse, responses=SUBMIT_ERRORS)
def submit_review(
    payload: ReviewSubmitRequest,
    webhook_secret: str | None = Header(default=None, alias=WEBHOOK_SECRET_HEADER),
    pipeline: ReviewIntakePipeline = Depends(get_intake_pipeline),
) -> ReviewSubmitResponse:
    outcome = pipeline.run(payload.model_dump(), presented_secret=webhook_secret)
    return ReviewSubmitResponse(
        message=SUBMIT_ACK_MESSAGE,
        status=outcome.status,
        review_id=outcome.review_id,
    )


@router.get("/reviews", response_model=ReviewListResponse, responses=LIST_ERRORS)
def list_reviews(
    business_id: str | None = Query(default=None),
    new_review_id: str | None = Query(default=None, alias="newReviewId"),
    reviews: ReviewService = Depends(get_review_service),
) -> ReviewListResponse:
    ordered = reviews.list_for_display(business_id, new_review_id)
    items = [ReviewResponse.model_validate(review) for review in ordered]
    return ReviewListResponse(reviews=items, count=len(items))
