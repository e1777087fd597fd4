"""
Database connection settings for the hostel occupancy core.
Provides SQLAlchemy engine construction and session factories.
"""

import logging
import time
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from hostel_core.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

SLOW_QUERY_SECONDS = 0.5


def create_db_engine(settings: Optional[Settings] = None) -> Engine:
    """
    Build the SQLAlchemy engine for the configured store.

    SQLite connections get foreign keys enabled and explicit BEGIN
    statements so that reads inside a session share one transaction.
    """
    settings = settings or get_settings()
    url = settings.get_database_url()

    if settings.is_sqlite():
        engine = create_engine(
            url,
            echo=settings.DB_ECHO,
            connect_args={
                "check_same_thread": False,
                "timeout": settings.DB_LOCK_TIMEOUT_SECONDS,
            },
        )
        _configure_sqlite(engine)
    else:
        engine = create_engine(
            url,
            pool_pre_ping=True,  # Check connection before using it
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_POOL_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
            echo=settings.DB_ECHO,
        )

    _install_query_timer(engine)
    logger.info(f"Database engine created for dialect {engine.dialect.name}")
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory used by the entity store."""
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=True,
        expire_on_commit=False,
    )


def _configure_sqlite(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def on_connect(dbapi_connection, connection_record):
        # Hand transaction control to SQLAlchemy's "begin" event below
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def _install_query_timer(engine: Engine) -> None:
    @event.listens_for(engine, "before_cursor_execute")
    def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        """Log query execution time - start timer"""
        conn.info.setdefault('query_start_time', []).append(time.time())

    @event.listens_for(engine, "after_cursor_execute")
    def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        """Log query execution time - stop timer and log if slow query"""
        total_time = time.time() - conn.info['query_start_time'].pop()

        if total_time > SLOW_QUERY_SECONDS:
            logger.warning(
                f"Slow query detected ({total_time:.4f}s): {statement[:100]}..."
            )
