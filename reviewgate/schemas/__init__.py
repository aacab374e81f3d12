"""Pydantic schema package for API contracts."""

from reviewgate.schemas.common import ErrorEnvelope, HealthResponse
from reviewgate.schemas.reviews import (
    ReviewListResponse,
    ReviewResponse,
    ReviewSubmitRequest,
    ReviewSubmitResponse,
)

__all__ = [
    "ErrorEnvelope",
    "HealthResponse",
    "ReviewListResponse",
    "ReviewResponse",
    "ReviewSubmitRequest",
    "ReviewSubmitResponse",
]
