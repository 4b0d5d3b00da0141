"""Database layer for the hospitality booking platform."""

from .base import Base, TimestampMixin
from .models_sqlalchemy import DocumentRecord
from .session import (
    engine,
    SessionLocal,
    create_engine,
    create_session_factory,
    session_scope,
    init_db,
    drop_db,
    close_db,
)
from .store import DocumentStore

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Models
    "DocumentRecord",
    # Session
    "engine",
    "SessionLocal",
    "create_engine",
    "create_session_factory",
    "session_scope",
    "init_db",
    "drop_db",
    "close_db",
    # Store
    "DocumentStore",
]
