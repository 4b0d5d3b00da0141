"""
Document store over SQLAlchemy.

Collections of JSON documents with find / create / update-by-id semantics.
Each call is its own transaction.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from domain.errors import StoreError
from .models_sqlalchemy import DocumentRecord
from .session import SessionLocal, session_scope


logger = logging.getLogger(__name__)


def _json_condition(key: str, value: Any):
    """Equality on a top-level JSON key, typed so SQL compares like with like."""
    element = DocumentRecord.data[key]
    if isinstance(value, bool):
        return element.as_boolean() == value
    if isinstance(value, int):
        return element.as_integer() == value
    if isinstance(value, float):
        return element.as_float() == value
    return element.as_string() == str(value)


class DocumentStore:
    """CRUD access to document collections."""

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        """
        Initialize the store.

        Args:
            session_factory: SQLAlchemy sessionmaker used for every operation
        """
        self.session_factory = session_factory

    def _run(self, operation: str, collection: str, work: Callable):
        try:
            with session_scope(self.session_factory) as session:
                return work(session)
        except SQLAlchemyError as e:
            logger.error(f"Document store {operation} failed on '{collection}': {e}")
            raise StoreError(f"Document store unavailable ({operation} {collection})") from e

    def create(self, collection: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document and return it with id and timestamps."""
        def work(session):
            payload = {k: v for k, v in data.items() if k not in ("id", "createdAt", "updatedAt")}
            record = DocumentRecord(collection=collection, data=payload)
            session.add(record)
            session.flush()
            return record.to_dict()

        return self._run("create", collection, work)

    def find_by_id(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        """Return a document by id, or None."""
        def work(session):
            record = session.get(DocumentRecord, document_id)
            if record is None or record.collection != collection:
                return None
            return record.to_dict()

        return self._run("find_by_id", collection, work)

    def find(self, collection: str, **filters: Any) -> List[Dict[str, Any]]:
        """Return documents whose top-level keys equal the given filters, oldest first."""
        def work(session):
            stmt = select(DocumentRecord).where(DocumentRecord.collection == collection)
            for key, value in filters.items():
                if value is not None:
                    stmt = stmt.where(_json_condition(key, value))
            stmt = stmt.order_by(DocumentRecord.created_at)
            return [record.to_dict() for record in session.scalars(stmt)]

        return self._run("find", collection, work)

    def find_one(self, collection: str, **filters: Any) -> Optional[Dict[str, Any]]:
        """Return the first matching document, or None."""
        documents = self.find(collection, **filters)
        return documents[0] if documents else None

    def update_by_id(
        self,
        collection: str,
        document_id: str,
        changes: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Shallow-merge `changes` into a document.

        Returns:
            The updated document, or None if it does not exist
        """
        def work(session):
            record = session.get(DocumentRecord, document_id)
            if record is None or record.collection != collection:
                return None
            merged = dict(record.data or {})
            merged.update({k: v for k, v in changes.items() if k not in ("id", "createdAt", "updatedAt")})
            # Reassign so the JSON column is flagged dirty
            record.data = merged
            session.flush()
            return record.to_dict()

        return self._run("update", collection, work)

    def replace_by_id(
        self,
        collection: str,
        document_id: str,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Replace a document's body, keeping id and createdAt. None if missing."""
        def work(session):
            record = session.get(DocumentRecord, document_id)
            if record is None or record.collection != collection:
                return None
            record.data = {k: v for k, v in data.items() if k not in ("id", "createdAt", "updatedAt")}
            session.flush()
            return record.to_dict()

        return self._run("replace", collection, work)

    def delete_by_id(self, collection: str, document_id: str) -> bool:
        """Delete a document. Returns False when it did not exist."""
        def work(session):
            record = session.get(DocumentRecord, document_id)
            if record is None or record.collection != collection:
                return False
            session.delete(record)
            return True

        return self._run("delete", collection, work)
