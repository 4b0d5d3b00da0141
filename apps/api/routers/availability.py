"""Restaurant slot availability."""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query

from apps.api.deps import get_availability_service
from domain.models import AvailabilitySlot
from services.availability import AvailabilityService


router = APIRouter(prefix="/restaurants", tags=["availability"])


@router.get("/{restaurant_id}/availability", response_model=List[AvailabilitySlot])
def get_availability(
    restaurant_id: str,
    on_date: date = Query(..., alias="date", description="Reservation date (YYYY-MM-DD)"),
    party_size: int = Query(1, alias="partySize", ge=1, le=100),
    service: AvailabilityService = Depends(get_availability_service),
):
    """
    Bookable slots for a date.

    Returns an empty list when the restaurant is closed that day.
    """
    return service.get_availability(restaurant_id, on_date, party_size)
