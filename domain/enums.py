"""Domain enums for the hospitality booking platform."""

from enum import Enum


class BusinessType(str, Enum):
    """Kinds of tenant business."""

    HOTEL = "hotel"
    RESTAURANT = "restaurant"
    SALON = "salon"

    @property
    def collection(self) -> str:
        """Document collection holding businesses of this type."""
        return f"{self.value}s"


class ReservationStatus(str, Enum):
    """Reservation status enumeration."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
    NO_SHOW = "no_show"


class ReservationKind(str, Enum):
    """How a reservation was priced; drives the invoice line description."""

    RESERVATION = "Reservation"
    PRIVATISATION = "Privatisation"


class InvoiceStatus(str, Enum):
    """Invoice status enumeration."""

    ISSUED = "issued"
    PAID = "paid"
    VOID = "void"


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in error extensions."""

    BAD_USER_INPUT = "BAD_USER_INPUT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class DayOfWeek(str, Enum):
    """Days of the week, as stored in `joursOuverts`."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class Collection(str, Enum):
    """Document store collections."""

    HOTELS = "hotels"
    RESTAURANTS = "restaurants"
    SALONS = "salons"
    RESERVATIONS = "reservations"
    INVOICES = "invoices"
    PRIVATISATION_OPTIONS = "privatisation_options"
    SERVICES = "services"
    STAFF = "staff"
    TABLES = "tables"
    ROOMS = "rooms"
