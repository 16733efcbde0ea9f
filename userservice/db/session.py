"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Callable, ContextManager, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from userservice.core.config import get_settings
from userservice.core.logging import get_logger

Base = declarative_base()

SessionFactory = Callable[[], ContextManager[Session]]

logger = get_logger(__name__)


@lru_cache
def get_engine():
    settings = get_settings()
    url = (settings.database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    logger.info("Creating engine for %s", url.split("://", 1)[0])
    return create_engine(url, future=True, pool_pre_ping=True, echo=settings.sql_echo)


@lru_cache
def _get_sessionmaker():
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False, future=True)


@contextmanager
def get_session() -> Iterator[Session]:
    session: Session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def session_scope(factory: Optional[SessionFactory] = None) -> Iterator[Session]:
    """
    One unit of work: commit on normal exit, roll back on any exception.

    The session is released by ``factory``'s own context manager on every
    exit path.
    """
    with (factory or get_session)() as session:
        try:
            yield session
            session.commit()
        except BaseException:
            session.rollback()
            raise


def dispose_engine() -> None:
    """Close pooled connections and forget the cached engine."""
    if get_engine.cache_info().currsize:
        logger.info("Disposing engine")
        get_engine().dispose()
    _get_sessionmaker.cache_clear()
    get_engine.cache_clear()
