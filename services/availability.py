"""
Fixed time-slot enumeration for restaurant booking pages.

Slot occupancy is reported here for display; reservation writes do not
consult it.
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, List

from core.utils_datetime import format_hhmm, iter_slot_minutes, parse_hhmm, weekday_name
from db.store import DocumentStore
from domain.enums import BusinessType, Collection, ReservationStatus
from domain.models import AvailabilitySlot, RestaurantSettings
from .business_service import BusinessService


logger = logging.getLogger(__name__)


def is_open_on(settings: RestaurantSettings, on_date: date) -> bool:
    """Open unless the weekday is excluded or the date is inside a closure."""
    if settings.open_days and weekday_name(on_date) not in settings.open_days:
        return False
    for closure in settings.closures:
        if closure.start <= on_date <= closure.end:
            return False
    return True


def enumerate_slots(settings: RestaurantSettings, on_date: date) -> List[str]:
    """
    Slot start times ("HH:MM") for a date, in window order without duplicates.

    Each window yields times from `ouverture` stepping by the slot frequency
    while the time is before `fermeture`. Malformed windows are skipped.
    """
    if not is_open_on(settings, on_date):
        return []

    frequency = settings.slot_frequency_minutes
    if frequency <= 0:
        logger.warning(f"Slot frequency {frequency} is not positive; no slots generated")
        return []

    slots: List[str] = []
    seen = set()
    for window in settings.time_windows:
        if not window.opening or not window.closing:
            continue
        try:
            opening = parse_hhmm(window.opening)
            closing = parse_hhmm(window.closing)
        except ValueError as e:
            logger.warning(f"Skipping malformed opening window {window.opening}-{window.closing}: {e}")
            continue
        for minutes in iter_slot_minutes(opening, closing, frequency):
            label = format_hhmm(minutes)
            if label not in seen:
                seen.add(label)
                slots.append(label)
    return slots


class AvailabilityService:
    """Computes per-slot availability for a restaurant and date."""

    def __init__(self, store: DocumentStore):
        self.store = store
        self.businesses = BusinessService(store)

    def get_availability(self, restaurant_id: str, on_date: date, party_size: int = 1) -> List[AvailabilitySlot]:
        """
        Availability of every slot on a date.

        A slot is available while its reservation count is below
        `maxReservationsParCreneau`, the party fits `maxPartySize`, and, when
        `capaciteTotale` is set, seated guests plus the party fit in it.

        Raises:
            BusinessNotFoundError: If the restaurant does not exist
        """
        restaurant = self.businesses.get(BusinessType.RESTAURANT, restaurant_id)
        settings = restaurant.settings

        slots = enumerate_slots(settings, on_date)
        if not slots:
            return []

        bookings: Dict[str, int] = defaultdict(int)
        guests: Dict[str, int] = defaultdict(int)
        for reservation in self.store.find(
            Collection.RESERVATIONS.value,
            businessId=restaurant_id,
            date=on_date.isoformat(),
        ):
            if reservation.get("status") == ReservationStatus.CANCELLED.value:
                continue
            slot_time = reservation.get("time")
            bookings[slot_time] += 1
            guests[slot_time] += int(reservation.get("partySize") or 0)

        party_fits = party_size <= settings.max_party_size
        result = []
        for slot in slots:
            remaining = max(settings.max_reservations_per_slot - bookings[slot], 0)
            seats_ok = (
                settings.total_capacity <= 0
                or guests[slot] + party_size <= settings.total_capacity
            )
            result.append(AvailabilitySlot(
                time=slot,
                available=party_fits and remaining > 0 and seats_ok,
                booked=bookings[slot],
                remaining=remaining,
            ))
        return result
