# hostel_core/db/init_db.py
"""Schema creation and teardown for the entity store."""
import logging

from sqlalchemy import inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

import hostel_core.models  # noqa: F401  registers every table on Base.metadata
from hostel_core.models.base import Base
from hostel_core.models.system import STORE_REVISION_ROW_ID, StoreRevision

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create all tables and the store revision row.

    Note: This is suitable for development/testing only.
    For production, manage the schema with migrations.
    """
    try:
        existing_tables = inspect(engine).get_table_names()
        Base.metadata.create_all(bind=engine)
        if existing_tables:
            logger.info(f"Database already had {len(existing_tables)} tables")
        else:
            logger.info("Database tables created successfully")

        with Session(engine) as session:
            exists = session.scalar(
                select(StoreRevision.id).where(StoreRevision.id == STORE_REVISION_ROW_ID)
            )
            if exists is None:
                session.add(StoreRevision(id=STORE_REVISION_ROW_ID, revision=0))
                session.commit()
    except Exception as e:
        logger.error(f"Entity store initialization failed: {e}")
        raise


def drop_db(engine: Engine) -> None:
    """
    Drop every table of the entity graph.

    Irreversible: all stored data is lost.
    """
    try:
        Base.metadata.drop_all(bind=engine)
        logger.warning("Entity store tables dropped")
    except Exception as e:
        logger.error(f"Dropping entity store tables failed: {e}")
        raise


def reset_db(engine: Engine) -> None:
    """
    Drop and recreate the schema, leaving an empty store at revision 0.

    Irreversible: all stored data is lost.
    """
    logger.warning("Resetting entity store")
    drop_db(engine)
    init_db(engine)
    logger.info("Entity store reset")
