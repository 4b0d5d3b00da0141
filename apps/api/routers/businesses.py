"""Hotel, restaurant and salon endpoints."""

from typing import List, Type

from fastapi import APIRouter, Depends

from apps.api.deps import get_business_service
from domain.enums import BusinessType
from domain.models import (
    DocumentModel,
    HotelCreate,
    HotelRecord,
    HotelUpdate,
    RestaurantCreate,
    RestaurantRecord,
    RestaurantUpdate,
    SalonCreate,
    SalonRecord,
    SalonUpdate,
    StoredDocument,
)
from services.business_service import BusinessService


def build_business_router(
    business_type: BusinessType,
    create_model: Type[DocumentModel],
    update_model: Type[DocumentModel],
    record_model: Type[StoredDocument],
) -> APIRouter:
    """CRUD routes for one business type, mounted at /<type>s."""
    router = APIRouter(prefix=f"/{business_type.collection}", tags=[business_type.collection])

    @router.post("", response_model=record_model, status_code=201)
    def create_business(
        payload: create_model,
        service: BusinessService = Depends(get_business_service),
    ):
        """Create a business."""
        return service.create(business_type, payload)

    @router.get("", response_model=List[record_model])
    def list_businesses(service: BusinessService = Depends(get_business_service)):
        """List active businesses."""
        return service.list(business_type)

    @router.get("/{business_id}", response_model=record_model)
    def get_business(
        business_id: str,
        service: BusinessService = Depends(get_business_service),
    ):
        """Get a business by ID."""
        return service.get(business_type, business_id)

    @router.patch("/{business_id}", response_model=record_model)
    def update_business(
        business_id: str,
        payload: update_model,
        service: BusinessService = Depends(get_business_service),
    ):
        """
        Partially update a business.

        Restaurant settings are validated before anything is written; errors
        name the offending settings field.
        """
        return service.update(business_type, business_id, payload)

    @router.delete("/{business_id}")
    def delete_business(
        business_id: str,
        service: BusinessService = Depends(get_business_service),
    ):
        """Deactivate a business."""
        return {"deleted": service.deactivate(business_type, business_id)}

    return router


restaurants_router = build_business_router(
    BusinessType.RESTAURANT, RestaurantCreate, RestaurantUpdate, RestaurantRecord
)
hotels_router = build_business_router(
    BusinessType.HOTEL, HotelCreate, HotelUpdate, HotelRecord
)
salons_router = build_business_router(
    BusinessType.SALON, SalonCreate, SalonUpdate, SalonRecord
)
