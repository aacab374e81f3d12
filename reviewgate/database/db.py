"""Engine and session factory for the review store."""

from __future__ import annotations

import logging
from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from reviewgate.core.config import get_config

logger = logging.getLogger(__name__)

config = get_config()
DATABASE_URL = config.DATABASE_URL


def _engine_options(database_url: str) -> dict:
    options = {"echo": config.DEBUG and config.LOG_LEVEL == "DEBUG"}
    if database_url.startswith("sqlite"):
        # Handlers run in the FastAPI threadpool, so connections cross threads.
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(pool_pre_ping=True, pool_recycle=3600, pool_size=10, max_overflow=20)
    return options


engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def get_engine() -> Engine:
    return engine


def get_active_database_url() -> str:
    return DATABASE_URL


def get_db() -> Generator[Session, None, None]:
    """Yield a request-scoped session and always close it."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def verify_database_connection() -> bool:
    """Run `SELECT 1` against the configured store; never rebinds elsewhere."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(
            "database.connection_failed",
            extra={
                "event": "database.connection_failed",
                "database_scheme": DATABASE_URL.split("://", 1)[0],
                "error": str(exc),
            },
        )
        return False
    return True
