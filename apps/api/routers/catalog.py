"""Catalog endpoints: salon services, staff, restaurant tables, hotel rooms."""

from typing import Dict, List, Type

from fastapi import APIRouter, Depends, Query

from apps.api.deps import get_catalog_services, require_business_id
from domain.models import DocumentModel, StoredDocument
from services.catalog_service import CATALOG_ENTITIES, CatalogService


def build_catalog_router(
    entity: str,
    prefix: str,
    create_model: Type[DocumentModel],
    update_model: Type[DocumentModel],
    record_model: Type[StoredDocument],
) -> APIRouter:
    """CRUD routes for one catalog entity."""
    router = APIRouter(prefix=prefix, tags=["catalog"])

    def get_service(services: Dict[str, CatalogService] = Depends(get_catalog_services)) -> CatalogService:
        return services[entity]

    @router.post("", response_model=record_model, status_code=201)
    def create_entry(payload: create_model, service: CatalogService = Depends(get_service)):
        return service.create(payload)

    @router.get("", response_model=List[record_model])
    def list_entries(
        business_id: str = Depends(require_business_id),
        active_only: bool = Query(False, alias="activeOnly"),
        service: CatalogService = Depends(get_service),
    ):
        return service.list_for_business(business_id, active_only)

    @router.get("/{entry_id}", response_model=record_model)
    def get_entry(entry_id: str, service: CatalogService = Depends(get_service)):
        return service.get(entry_id)

    @router.patch("/{entry_id}", response_model=record_model)
    def update_entry(entry_id: str, payload: update_model, service: CatalogService = Depends(get_service)):
        return service.update(entry_id, payload)

    @router.delete("/{entry_id}")
    def delete_entry(entry_id: str, service: CatalogService = Depends(get_service)):
        return {"deleted": service.delete(entry_id)}

    return router


PREFIXES = {
    "service": "/services",
    "staff": "/staff",
    "table": "/tables",
    "room": "/rooms",
}

catalog_routers = [
    build_catalog_router(entity, PREFIXES[entity], create_model, update_model, record_model)
    for entity, (_collection, create_model, update_model, record_model) in CATALOG_ENTITIES.items()
]
