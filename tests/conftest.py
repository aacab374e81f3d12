from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from reviewgate.core.config import get_config
from reviewgate.llm.client import ClassifierResponse
from reviewgate.models import Base, Review, ReviewStatus

BASE_TIME = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)
ALLOW_JSON = '{"safety_score": 0.1, "sentiment_score": 0.5, "action": "allow"}'


class StubClassifierClient:
    """Records prompts and replays a canned model output or error."""

    def __init__(self, text: str = ALLOW_JSON, error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> ClassifierResponse:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return ClassifierResponse(
            text=self.text,
            provider="stub",
            model_name="stub-model",
            prompt_hash="hash",
            latency_ms=1,
            generated_at="2026-10-18T00:00:00+00:00",
        )


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def settings():
    return replace(get_config(), WEBHOOK_SECRET=None, API_PREFIX="/api/v1")


@pytest.fixture
def seed_review(db_session):
    def _seed(
        business_id: str = "biz-1",
        status: ReviewStatus = ReviewStatus.APPROVED,
        pinned: bool = False,
        minutes: int = 0,
        sentiment: float = 0.5,
        content: str = "Lovely service.",
    ) -> Review:
        review = Review(
            business_id=business_id,
            reviewer_name="Ari",
            phone="555-0100",
            content=content,
            status=status,
            sentiment_score=sentiment,
            pinned=pinned,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        db_session.add(review)
        db_session.commit()
        db_session.refresh(review)
        return review

    return _seed


@pytest.fixture
def stub_classifier():
    return StubClassifierClient
