"""SQLAlchemy model package for the review schema."""

from reviewgate.models.base import Base
from reviewgate.models.enums import ClassifierAction, ReviewStatus
from reviewgate.models.review import Review

__all__ = [
    "Base",
    "ClassifierAction",
    "Review",
    "ReviewStatus",
]
