from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from app.config.settings import settings

# Lazy initialization to avoid import-time database connections
_engine = None
_SessionLocal = None


def _get_engine():
    """Get or create the database engine (lazy initialization)."""
    global _engine
    if _engine is None:
        logger.info(f"Initializing database engine: {settings.database_url}")

        connect_args = {}
        if "sqlite" in settings.database_url.lower():
            connect_args = {"check_same_thread": False}

        _engine = create_engine(
            settings.database_url,
            connect_args=connect_args,
            echo=False,
            pool_pre_ping=True,
        )
        logger.info("Database engine initialized")
    return _engine


def _get_session_local():
    """Get or create the session factory (lazy initialization)."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_get_engine(), expire_on_commit=False)
        logger.info("Database session factory initialized")
    return _SessionLocal


def init_db() -> None:
    """Create tables and verify the database answers a trivial query.

    Raises:
        Exception: If the database is unreachable
    """
    from app.db.models import Base

    engine = _get_engine()
    logger.info("Ensuring database tables exist")
    Base.metadata.create_all(bind=engine)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection test successful")
    except Exception as e:
        logger.error(f"Database connection test failed: {e}")
        raise


def get_db() -> Generator[Session, None, None]:
    """Get database session for FastAPI dependencies.

    FastAPI closes the session once the response is sent.

    Yields:
        Session: SQLAlchemy database session
    """
    logger.debug("Creating new database session (FastAPI dependency)")
    session = _get_session_local()()
    try:
        yield session
    finally:
        logger.debug("Closing database session (FastAPI dependency)")
        session.close()


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get database session context manager for non-request code (CLI).

    Commits on success, rolls back and re-raises on any error.
    """
    session = _get_session_local()()
    try:
        yield session
        session.commit()
    except Exception as e:
        logger.error(f"Database session error, rolling back: {e}")
        session.rollback()
        raise
    finally:
        session.close()
