"""
Reservation service for hotels, restaurants and salons.
Handles creation with server-side totals, the hotel date guard, updates,
cancellation and the post-commit steps (invoice generation).
"""
import logging
from datetime import date
from typing import Callable, List, Optional

from core.logging import LogContext
from core.settings import settings
from core.utils_datetime import stay_nights
from db.store import DocumentStore
from domain.enums import BusinessType, Collection, ReservationKind, ReservationStatus
from domain.errors import BookingValidationError, ReservationNotFoundError
from domain.models import (
    PrivatisationReservationCreate,
    ReservationCreate,
    ReservationRecord,
    ReservationUpdate,
    RestaurantReservationCreate,
)
from .business_service import BusinessService
from .hotel_guard import ensure_stay_within_opening_periods
from .invoice_service import InvoiceGenerator
from .pricing import (
    compute_privatisation_total,
    compute_standard_total,
    resolve_price_per_guest,
)


logger = logging.getLogger(__name__)

RESERVATIONS = Collection.RESERVATIONS.value

# Runs after the reservation write; failures are logged and never undo the write
PostCommitHook = Callable[[ReservationRecord, ReservationKind], object]


class ReservationService:
    """Service for managing reservations."""

    def __init__(
        self,
        store: DocumentStore,
        post_commit_hooks: Optional[List[PostCommitHook]] = None,
        default_price_per_guest: Optional[float] = None,
        privatisation_price_per_guest: Optional[float] = None,
    ):
        """
        Initialize the reservation service.

        Args:
            store: Document store
            post_commit_hooks: Steps run after each reservation write
                (defaults to invoice generation)
            default_price_per_guest: Fallback restaurant price per guest
            privatisation_price_per_guest: Flat privatisation rate per guest
        """
        self.store = store
        self.businesses = BusinessService(store)
        if post_commit_hooks is None:
            post_commit_hooks = [InvoiceGenerator(store).generate]
        self.post_commit_hooks = list(post_commit_hooks)
        self.default_price_per_guest = (
            default_price_per_guest
            if default_price_per_guest is not None
            else settings.default_price_per_guest
        )
        self.privatisation_price_per_guest = (
            privatisation_price_per_guest
            if privatisation_price_per_guest is not None
            else settings.privatisation_price_per_guest
        )

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create_reservation(self, data: ReservationCreate) -> ReservationRecord:
        """
        Create a reservation for any business type.

        Args:
            data: Reservation input (no client-supplied total)

        Returns:
            Created reservation with its server-computed total

        Raises:
            BusinessNotFoundError: If the referenced business does not exist
            HotelClosedError: If a hotel stay is outside its opening periods
            BookingValidationError: If required fields are missing
        """
        business = self.businesses.get(data.business_type, data.business_id)

        if data.business_type == BusinessType.HOTEL:
            ensure_stay_within_opening_periods(
                business.opening_periods,
                check_in=data.check_in,
                check_out=data.check_out,
                on_date=data.date,
            )
        else:
            if data.date is None:
                raise BookingValidationError("Reservation date is required.", field="date")
            if data.business_type == BusinessType.RESTAURANT and not data.time:
                raise BookingValidationError("Reservation time is required.", field="time")

        document = data.to_document()
        document["totalAmount"] = self._compute_total(data, business)

        return self._persist(document, ReservationKind.RESERVATION)

    def create_reservation_v2(self, data: RestaurantReservationCreate) -> ReservationRecord:
        """
        Standard restaurant booking priced from the restaurant's time windows.

        Raises:
            BusinessNotFoundError: If the restaurant does not exist
        """
        restaurant = self.businesses.get(BusinessType.RESTAURANT, data.restaurant_id)

        price_per_guest = resolve_price_per_guest(
            restaurant.settings.time_windows,
            data.time,
            default_price=self.default_price_per_guest,
        )
        total = compute_standard_total(data.guests, price_per_guest)

        document = {
            "businessId": restaurant.id,
            "businessType": BusinessType.RESTAURANT.value,
            "partySize": data.guests,
            "date": data.date.isoformat(),
            "time": data.time,
            "status": ReservationStatus.CONFIRMED.value,
            "totalAmount": total,
            "emplacement": data.seating_area,
            "notes": data.notes,
            "specialRequests": data.special_requests,
            "customerId": data.customer_id,
            "customerInfo": data.customer_info.to_document() if data.customer_info else None,
        }
        return self._persist(document, ReservationKind.RESERVATION)

    def create_privatisation_v2(self, data: PrivatisationReservationCreate) -> ReservationRecord:
        """
        Privatisation booking at the flat per-guest rate.

        The matching privatisation option (by name) is only looked up to warn
        when it carries a tariff that this rate ignores.

        Raises:
            BusinessNotFoundError: If the restaurant does not exist
        """
        restaurant = self.businesses.get(BusinessType.RESTAURANT, data.restaurant_id)
        total = compute_privatisation_total(data.guests, self.privatisation_price_per_guest)

        self._warn_on_ignored_tariff(restaurant.id, data.type)

        document = {
            "businessId": restaurant.id,
            "businessType": BusinessType.RESTAURANT.value,
            "partySize": data.guests,
            "date": data.date.isoformat(),
            "time": data.time,
            "duration": data.duration_hours,
            "status": ReservationStatus.CONFIRMED.value,
            "totalAmount": total,
            "notes": f"Privatisation: {data.type} - {data.space}, Menu: {data.menu}",
            "specialRequests": f"Privatisation event for {data.guests} guests.",
            "customerId": data.customer_id,
            "customerInfo": data.customer_info.to_document() if data.customer_info else None,
        }
        return self._persist(document, ReservationKind.PRIVATISATION)

    # ------------------------------------------------------------------
    # Queries and updates
    # ------------------------------------------------------------------

    def get_reservation(self, reservation_id: str) -> ReservationRecord:
        """
        Get a reservation by ID.

        Raises:
            ReservationNotFoundError: If reservation not found
        """
        document = self.store.find_by_id(RESERVATIONS, reservation_id)
        if document is None:
            raise ReservationNotFoundError(f"Reservation {reservation_id} not found", field="id")
        return ReservationRecord.model_validate(document)

    def list_reservations(
        self,
        business_id: str,
        business_type: Optional[BusinessType] = None,
        status: Optional[ReservationStatus] = None,
        on_date: Optional[date] = None,
    ) -> List[ReservationRecord]:
        """
        List reservations of a business, most recent date first.

        Args:
            business_id: Owning business
            business_type: Optional business type filter
            status: Optional status filter
            on_date: Optional reservation date filter
        """
        documents = self.store.find(
            RESERVATIONS,
            businessId=business_id,
            businessType=business_type.value if business_type else None,
            status=status.value if status else None,
            date=on_date.isoformat() if on_date else None,
        )
        reservations = [ReservationRecord.model_validate(d) for d in documents]
        reservations.sort(key=lambda r: r.date or r.check_in or date.min, reverse=True)
        return reservations

    def update_reservation(self, reservation_id: str, data: ReservationUpdate) -> ReservationRecord:
        """
        Apply a partial update. The total amount is not client-editable.

        Raises:
            ReservationNotFoundError: If reservation not found
        """
        document = self.store.update_by_id(RESERVATIONS, reservation_id, data.to_document(partial=True))
        if document is None:
            raise ReservationNotFoundError(f"Reservation {reservation_id} not found", field="id")
        logger.info(f"Updated reservation {reservation_id}")
        return ReservationRecord.model_validate(document)

    def cancel_reservation(self, reservation_id: str) -> ReservationRecord:
        """
        Cancel a reservation (kept for history).

        Raises:
            ReservationNotFoundError: If reservation not found
        """
        document = self.store.update_by_id(
            RESERVATIONS, reservation_id, {"status": ReservationStatus.CANCELLED.value}
        )
        if document is None:
            raise ReservationNotFoundError(f"Reservation {reservation_id} not found", field="id")
        logger.info(f"Cancelled reservation {reservation_id}")
        return ReservationRecord.model_validate(document)

    def delete_reservation(self, reservation_id: str) -> bool:
        """Permanently delete a reservation. Returns False if it did not exist."""
        deleted = self.store.delete_by_id(RESERVATIONS, reservation_id)
        if deleted:
            logger.info(f"Deleted reservation {reservation_id}")
        return deleted

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _compute_total(self, data: ReservationCreate, business) -> float:
        if data.business_type == BusinessType.RESTAURANT:
            price_per_guest = resolve_price_per_guest(
                business.settings.time_windows,
                data.time,
                default_price=self.default_price_per_guest,
            )
            return compute_standard_total(data.party_size, price_per_guest)

        if data.business_type == BusinessType.HOTEL and data.room_id:
            room = self._catalog_entry(Collection.ROOMS, data.room_id, business.id, "roomId")
            nights = stay_nights(data.check_in or data.date, data.check_out)
            return float(room.get("pricePerNight") or 0) * nights

        if data.business_type == BusinessType.SALON and data.service_id:
            service = self._catalog_entry(Collection.SERVICES, data.service_id, business.id, "serviceId")
            return float(service.get("price") or 0)

        return 0.0

    def _catalog_entry(self, collection: Collection, entry_id: str, business_id: str, field: str) -> dict:
        entry = self.store.find_by_id(collection.value, entry_id)
        if entry is None or entry.get("businessId") != business_id:
            raise BookingValidationError(
                f"{field} {entry_id} does not belong to business {business_id}",
                field=field,
            )
        return entry

    def _warn_on_ignored_tariff(self, restaurant_id: str, option_name: str) -> None:
        option = self.store.find_one(
            Collection.PRIVATISATION_OPTIONS.value,
            restaurantId=restaurant_id,
            nom=option_name,
        )
        if option is None:
            return
        has_tariff = bool(option.get("tarif")) or any(
            (menu.get("prix") or 0) > 0 for menu in option.get("menusDetails") or []
        )
        if has_tariff:
            logger.warning(
                f"Privatisation option '{option_name}' of restaurant {restaurant_id} "
                f"has a configured tariff; the flat rate of "
                f"{self.privatisation_price_per_guest} per guest is applied instead"
            )

    def _persist(self, document: dict, kind: ReservationKind) -> ReservationRecord:
        created = self.store.create(RESERVATIONS, document)
        reservation = ReservationRecord.model_validate(created)
        logger.info(
            f"Created {kind.value.lower()} {reservation.id} for {reservation.business_type.value} "
            f"{reservation.business_id} (total {reservation.total_amount})"
        )
        with LogContext(logger, reservation_id=reservation.id, business_id=reservation.business_id):
            self._run_post_commit_hooks(reservation, kind)
        return reservation

    def _run_post_commit_hooks(self, reservation: ReservationRecord, kind: ReservationKind) -> None:
        """Run each post-commit step in order; one failing step does not affect the others."""
        for hook in self.post_commit_hooks:
            try:
                hook(reservation, kind)
            except Exception:
                logger.error(
                    f"Post-commit step {getattr(hook, '__qualname__', hook)!s} failed "
                    f"for reservation {reservation.id}",
                    exc_info=True,
                )
