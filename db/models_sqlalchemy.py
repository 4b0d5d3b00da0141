"""SQLAlchemy models for the booking platform database tables."""

from typing import Any, Dict
from uuid import uuid4

from sqlalchemy import JSON, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


def new_document_id() -> str:
    """Generate a 32-character hex document id."""
    return uuid4().hex


class DocumentRecord(Base, TimestampMixin):
    """
    One schemaless document in a named collection.

    Businesses, reservations, invoices and catalog entries all live here; the
    document body is the JSON `data` column keyed by the wire field names.
    """

    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=new_document_id,
    )

    collection: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )

    data: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    __table_args__ = (
        Index("ix_documents_collection_created_at", "collection", "created_at"),
    )

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into the document shape returned to services."""
        document = dict(self.data or {})
        document["id"] = self.id
        document["createdAt"] = self.created_at.isoformat() if self.created_at else None
        document["updatedAt"] = self.updated_at.isoformat() if self.updated_at else None
        return document

    def __repr__(self) -> str:
        return f"<DocumentRecord(id={self.id}, collection='{self.collection}')>"
