"""Reservation endpoints."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from apps.api.deps import get_reservation_service, require_business_id
from domain.enums import BusinessType, ReservationStatus
from domain.models import (
    PrivatisationReservationCreate,
    ReservationCreate,
    ReservationRecord,
    ReservationUpdate,
    RestaurantReservationCreate,
)
from services.reservation_service import ReservationService


router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.post("", response_model=ReservationRecord, status_code=201)
def create_reservation(
    payload: ReservationCreate,
    service: ReservationService = Depends(get_reservation_service),
):
    """
    Create a reservation for a hotel, restaurant or salon.

    Hotel stays must fall inside one of the hotel's opening periods. The total
    is computed server-side and an invoice is issued when it is positive.
    """
    return service.create_reservation(payload)


@router.post("/v2", response_model=ReservationRecord, status_code=201)
def create_reservation_v2(
    payload: RestaurantReservationCreate,
    service: ReservationService = Depends(get_reservation_service),
):
    """Book a restaurant table, priced from the restaurant's time windows."""
    return service.create_reservation_v2(payload)


@router.post("/privatisation", response_model=ReservationRecord, status_code=201)
def create_privatisation_v2(
    payload: PrivatisationReservationCreate,
    service: ReservationService = Depends(get_reservation_service),
):
    """Book a restaurant privatisation at the flat per-guest rate."""
    return service.create_privatisation_v2(payload)


@router.get("", response_model=List[ReservationRecord])
def list_reservations(
    business_id: str = Depends(require_business_id),
    business_type: Optional[BusinessType] = Query(None, alias="businessType"),
    status: Optional[ReservationStatus] = Query(None, description="Filter by reservation status"),
    on_date: Optional[date] = Query(None, alias="date", description="Filter by reservation date"),
    service: ReservationService = Depends(get_reservation_service),
):
    """List reservations of a business, most recent first."""
    return service.list_reservations(business_id, business_type, status, on_date)


@router.get("/{reservation_id}", response_model=ReservationRecord)
def get_reservation(
    reservation_id: str,
    service: ReservationService = Depends(get_reservation_service),
):
    """Get a specific reservation by ID."""
    return service.get_reservation(reservation_id)


@router.patch("/{reservation_id}", response_model=ReservationRecord)
def update_reservation(
    reservation_id: str,
    payload: ReservationUpdate,
    service: ReservationService = Depends(get_reservation_service),
):
    """Partially update a reservation."""
    return service.update_reservation(reservation_id, payload)


@router.post("/{reservation_id}/cancel", response_model=ReservationRecord)
def cancel_reservation(
    reservation_id: str,
    service: ReservationService = Depends(get_reservation_service),
):
    """Cancel a reservation."""
    return service.cancel_reservation(reservation_id)


@router.delete("/{reservation_id}")
def delete_reservation(
    reservation_id: str,
    service: ReservationService = Depends(get_reservation_service),
):
    """Permanently delete a reservation."""
    return {"deleted": service.delete_reservation(reservation_id)}
