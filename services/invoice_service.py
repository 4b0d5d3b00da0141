"""
Invoices derived from reservations.

Each invoice carries exactly one line item for the reservation total.
"""
import logging
from typing import Any, Dict, List, Optional

from core.utils_datetime import get_current_datetime
from db.store import DocumentStore
from domain.enums import Collection, InvoiceStatus, ReservationKind
from domain.errors import InvoiceNotFoundError
from domain.models import InvoiceRecord, ReservationRecord


logger = logging.getLogger(__name__)


def build_invoice(reservation: ReservationRecord, kind: ReservationKind) -> Dict[str, Any]:
    """
    Build the invoice document for a reservation.

    Args:
        reservation: Persisted reservation with its computed total
        kind: Drives the line description ("Reservation <id>" / "Privatisation <id>")

    Returns:
        Invoice document (wire keys)
    """
    total = reservation.total_amount
    return {
        "reservationId": reservation.id,
        "businessId": reservation.business_id,
        "items": [
            {
                "description": f"{kind.value} {reservation.id}",
                "price": total,
                "quantity": 1,
                "total": total,
            }
        ],
        "total": total,
        "date": get_current_datetime().date().isoformat(),
        "status": InvoiceStatus.ISSUED.value,
    }


class InvoiceGenerator:
    """Creates the invoice for a freshly written reservation."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def generate(self, reservation: ReservationRecord, kind: ReservationKind) -> Optional[InvoiceRecord]:
        """
        Persist the invoice for a reservation.

        Reservations without a positive total or a business reference get no
        invoice. Store failures propagate to the caller, which decides whether
        they matter.

        Returns:
            The created invoice, or None when none applies
        """
        if not reservation.business_id or not reservation.total_amount or reservation.total_amount <= 0:
            logger.debug(f"No invoice for reservation {reservation.id}: nothing to bill")
            return None

        document = self.store.create(Collection.INVOICES.value, build_invoice(reservation, kind))
        logger.info(
            f"Created invoice {document['id']} for reservation {reservation.id} "
            f"(total {reservation.total_amount})"
        )
        return InvoiceRecord.model_validate(document)


class InvoiceService:
    """Read access to invoices."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def get(self, invoice_id: str) -> InvoiceRecord:
        """
        Get an invoice by ID.

        Raises:
            InvoiceNotFoundError: If invoice not found
        """
        document = self.store.find_by_id(Collection.INVOICES.value, invoice_id)
        if document is None:
            raise InvoiceNotFoundError(f"Invoice {invoice_id} not found", field="id")
        return InvoiceRecord.model_validate(document)

    def list_for_business(self, business_id: str) -> List[InvoiceRecord]:
        """Invoices of a business, newest first."""
        documents = self.store.find(Collection.INVOICES.value, businessId=business_id)
        return [InvoiceRecord.model_validate(d) for d in reversed(documents)]

    def list_for_reservation(self, reservation_id: str) -> List[InvoiceRecord]:
        """Invoices issued for one reservation."""
        documents = self.store.find(Collection.INVOICES.value, reservationId=reservation_id)
        return [InvoiceRecord.model_validate(d) for d in documents]
