"""Database session management for the booking platform."""

from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.settings import settings


def create_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create the SQLAlchemy engine backing the document store.

    Args:
        url: Database URL (defaults to settings.database_url)
        echo: Whether to log all SQL statements (defaults to settings.db_echo)

    Returns:
        SQLAlchemy engine
    """
    url = url or settings.database_url
    echo = settings.db_echo if echo is None else echo

    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite:///"):
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
        return sa_create_engine(url, echo=echo, **kwargs)

    return sa_create_engine(url, echo=echo, pool_pre_ping=True)


def create_session_factory(bind: Engine) -> sessionmaker:
    """Session factory with the settings every store session uses."""
    return sessionmaker(
        bind=bind,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )


# Global engine instance
engine: Engine = create_engine()

SessionLocal = create_session_factory(engine)


@contextmanager
def session_scope(factory: sessionmaker = SessionLocal) -> Generator[Session, None, None]:
    """
    Context manager for one transactional unit of work.

    Example:
        with session_scope() as session:
            session.add(record)
    """
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(bind: Engine = None) -> None:
    """Initialize database by creating all tables."""
    from .base import Base
    from . import models_sqlalchemy  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_db(bind: Engine = None) -> None:
    """Drop all database tables. Use with caution!"""
    from .base import Base

    Base.metadata.drop_all(bind=bind or engine)


def close_db() -> None:
    """Close database engine and all connections."""
    engine.dispose()
