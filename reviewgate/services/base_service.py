"""Session ownership shared by persistence-backed services."""

from __future__ import annotations

from sqlalchemy.orm import Session

from reviewgate.database import db as db_module


class BaseService:
    """Holds the SQLAlchemy session a service reads and writes through."""

    def __init__(self, db: Session | None = None) -> None:
        self.db = db if db is not None else db_module.SessionLocal()

    def commit(self) -> None:
        """Commit, undoing the pending transaction if the commit fails."""
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
