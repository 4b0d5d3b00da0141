"""
Pass-through CRUD for per-business catalog entries: salon services, staff,
restaurant tables and hotel rooms.
"""
import logging
from typing import Dict, List, Type

from db.store import DocumentStore
from domain.enums import Collection
from domain.errors import DocumentNotFoundError
from domain.models import (
    DocumentModel,
    RoomCreate,
    RoomRecord,
    RoomUpdate,
    ServiceCreate,
    ServiceRecord,
    ServiceUpdate,
    StaffCreate,
    StaffRecord,
    StaffUpdate,
    StoredDocument,
    TableCreate,
    TableRecord,
    TableUpdate,
)


logger = logging.getLogger(__name__)


class CatalogService:
    """CRUD over one catalog collection."""

    def __init__(
        self,
        store: DocumentStore,
        collection: Collection,
        record_model: Type[StoredDocument],
        entity_name: str,
    ):
        self.store = store
        self.collection = collection.value
        self.record_model = record_model
        self.entity_name = entity_name

    def create(self, data: DocumentModel) -> StoredDocument:
        document = self.store.create(self.collection, data.to_document())
        logger.info(f"Created {self.entity_name} {document['id']}")
        return self.record_model.model_validate(document)

    def get(self, entry_id: str) -> StoredDocument:
        document = self.store.find_by_id(self.collection, entry_id)
        if document is None:
            raise DocumentNotFoundError(f"{self.entity_name.capitalize()} {entry_id} not found", field="id")
        return self.record_model.model_validate(document)

    def list_for_business(self, business_id: str, active_only: bool = False) -> List[StoredDocument]:
        documents = self.store.find(
            self.collection,
            businessId=business_id,
            isActive=True if active_only else None,
        )
        return [self.record_model.model_validate(d) for d in documents]

    def update(self, entry_id: str, data: DocumentModel) -> StoredDocument:
        document = self.store.update_by_id(self.collection, entry_id, data.to_document(partial=True))
        if document is None:
            raise DocumentNotFoundError(f"{self.entity_name.capitalize()} {entry_id} not found", field="id")
        return self.record_model.model_validate(document)

    def delete(self, entry_id: str) -> bool:
        return self.store.delete_by_id(self.collection, entry_id)


# name -> (collection, create model, update model, record model)
CATALOG_ENTITIES: Dict[str, tuple] = {
    "service": (Collection.SERVICES, ServiceCreate, ServiceUpdate, ServiceRecord),
    "staff": (Collection.STAFF, StaffCreate, StaffUpdate, StaffRecord),
    "table": (Collection.TABLES, TableCreate, TableUpdate, TableRecord),
    "room": (Collection.ROOMS, RoomCreate, RoomUpdate, RoomRecord),
}


def build_catalog_services(store: DocumentStore) -> Dict[str, CatalogService]:
    """One CatalogService per catalog entity, keyed by entity name."""
    return {
        name: CatalogService(store, collection, record_model, name)
        for name, (collection, _create, _update, record_model) in CATALOG_ENTITIES.items()
    }
