"""Dependency providers for API handlers."""

from __future__ import annotations

from collections.abc import Generator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from reviewgate.core.config import Config, get_config
from reviewgate.database.db import get_db
from reviewgate.llm.client import ClassifierClient
from reviewgate.services.classification_service import ClassificationService
from reviewgate.services.intake_service import ReviewIntakePipeline
from reviewgate.services.review_service import ReviewService


def get_settings() -> Config:
    """Return validated application configuration."""
    return get_config()


def get_db_session() -> Generator[Session, None, None]:
    """Yield SQLAlchemy session for dependency injection."""
    yield from get_db()


@lru_cache(maxsize=1)
def get_classification_service() -> ClassificationService:
    """Process-wide classifier adapter; built on first use and reused."""
    return ClassificationService(client=ClassifierClient(settings=get_config()))


def get_review_service(db: Session = Depends(get_db_session)) -> ReviewService:
    return ReviewService(db=db)


def get_intake_pipeline(
    reviews: ReviewService = Depends(get_review_service),
    classifier: ClassificationService = Depends(get_classification_service),
    settings: Config = Depends(get_settings),
) -> ReviewIntakePipeline:
    return ReviewIntakePipeline(classifier=classifier, reviews=reviews, settings=settings)
