"""FastAPI dependencies: store, services and tenant resolution."""

from typing import Dict, Optional

from fastapi import Depends, Query, Request

from core.settings import settings
from db.store import DocumentStore
from domain.errors import BookingValidationError
from services.availability import AvailabilityService
from services.business_service import BusinessService
from services.catalog_service import CatalogService, build_catalog_services
from services.invoice_service import InvoiceService
from services.privatisation_service import PrivatisationService
from services.reservation_service import ReservationService


_store: Optional[DocumentStore] = None


def get_store() -> DocumentStore:
    """Document store bound to the global engine."""
    global _store
    if _store is None:
        _store = DocumentStore()
    return _store


def get_business_service(store: DocumentStore = Depends(get_store)) -> BusinessService:
    return BusinessService(store)


def get_reservation_service(store: DocumentStore = Depends(get_store)) -> ReservationService:
    return ReservationService(store)


def get_invoice_service(store: DocumentStore = Depends(get_store)) -> InvoiceService:
    return InvoiceService(store)


def get_privatisation_service(store: DocumentStore = Depends(get_store)) -> PrivatisationService:
    return PrivatisationService(store)


def get_availability_service(store: DocumentStore = Depends(get_store)) -> AvailabilityService:
    return AvailabilityService(store)


def get_catalog_services(store: DocumentStore = Depends(get_store)) -> Dict[str, CatalogService]:
    return build_catalog_services(store)


def get_tenant_id(request: Request) -> Optional[str]:
    """Business id carried by the tenant header, if any."""
    return request.headers.get(settings.tenant_header) or None


def require_business_id(
    business_id: Optional[str] = Query(None, alias="businessId"),
    tenant_id: Optional[str] = Depends(get_tenant_id),
) -> str:
    """
    Business scope for listings: explicit `businessId`, else the tenant header.

    Raises:
        BookingValidationError: If neither is present
    """
    resolved = business_id or tenant_id
    if not resolved:
        raise BookingValidationError(
            f"businessId query parameter or {settings.tenant_header} header is required",
            field="businessId",
        )
    return resolved
