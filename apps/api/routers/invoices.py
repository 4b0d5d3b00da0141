"""Invoice endpoints (read-only; invoices are issued by reservation creation)."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from apps.api.deps import get_invoice_service, get_tenant_id
from domain.errors import BookingValidationError
from domain.models import InvoiceRecord
from services.invoice_service import InvoiceService


router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=List[InvoiceRecord])
def list_invoices(
    business_id: Optional[str] = Query(None, alias="businessId"),
    reservation_id: Optional[str] = Query(None, alias="reservationId"),
    tenant_id: Optional[str] = Depends(get_tenant_id),
    service: InvoiceService = Depends(get_invoice_service),
):
    """List invoices of a reservation, or of a business (newest first)."""
    if reservation_id:
        return service.list_for_reservation(reservation_id)
    business_id = business_id or tenant_id
    if not business_id:
        raise BookingValidationError("businessId or reservationId is required", field="businessId")
    return service.list_for_business(business_id)


@router.get("/{invoice_id}", response_model=InvoiceRecord)
def get_invoice(
    invoice_id: str,
    service: InvoiceService = Depends(get_invoice_service),
):
    """Get a specific invoice by ID."""
    return service.get(invoice_id)
