"""Create the review tables on the active database."""

import logging

import reviewgate.database.db as db_module
from reviewgate.core.startup import bootstrap
from reviewgate.models import Base

logger = logging.getLogger(__name__)


def create_tables() -> None:
    Base.metadata.create_all(bind=db_module.get_engine())
    logger.info(
        "database.tables.created",
        extra={
            "event": "database.tables.created",
            "database_scheme": db_module.get_active_database_url().split("://", 1)[0],
            "tables": sorted(Base.metadata.tables),
        },
    )


def init_db() -> None:
    bootstrap()
    create_tables()


if __name__ == "__main__":
    init_db()
