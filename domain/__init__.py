"""Domain layer for the hospitality booking platform."""

from .enums import (
    BusinessType,
    Collection,
    DayOfWeek,
    ErrorCode,
    InvoiceStatus,
    ReservationKind,
    ReservationStatus,
)
from .errors import (
    BookingPlatformError,
    BookingValidationError,
    BusinessNotFoundError,
    DocumentNotFoundError,
    HotelClosedError,
    InvoiceNotFoundError,
    NotFoundError,
    PrivatisationOptionNotFoundError,
    ReservationNotFoundError,
    StoreError,
)
from .models import (
    AvailabilitySlot,
    CustomTable,
    HotelCreate,
    HotelRecord,
    HotelUpdate,
    InvoiceItem,
    InvoiceRecord,
    OpeningPeriod,
    PrivatisationOptionCreate,
    PrivatisationOptionRecord,
    PrivatisationOptionUpdate,
    PrivatisationReservationCreate,
    ReservationCreate,
    ReservationRecord,
    ReservationUpdate,
    RestaurantCreate,
    RestaurantRecord,
    RestaurantReservationCreate,
    RestaurantSettings,
    RestaurantSettingsUpdate,
    RestaurantUpdate,
    SalonCreate,
    SalonRecord,
    SalonUpdate,
    TableInventory,
    TimeWindow,
)

__all__ = [
    # Enums
    "BusinessType",
    "Collection",
    "DayOfWeek",
    "ErrorCode",
    "InvoiceStatus",
    "ReservationKind",
    "ReservationStatus",
    # Errors
    "BookingPlatformError",
    "BookingValidationError",
    "BusinessNotFoundError",
    "DocumentNotFoundError",
    "HotelClosedError",
    "InvoiceNotFoundError",
    "NotFoundError",
    "PrivatisationOptionNotFoundError",
    "ReservationNotFoundError",
    "StoreError",
    # Models
    "AvailabilitySlot",
    "CustomTable",
    "HotelCreate",
    "HotelRecord",
    "HotelUpdate",
    "InvoiceItem",
    "InvoiceRecord",
    "OpeningPeriod",
    "PrivatisationOptionCreate",
    "PrivatisationOptionRecord",
    "PrivatisationOptionUpdate",
    "PrivatisationReservationCreate",
    "ReservationCreate",
    "ReservationRecord",
    "ReservationUpdate",
    "RestaurantCreate",
    "RestaurantRecord",
    "RestaurantReservationCreate",
    "RestaurantSettings",
    "RestaurantSettingsUpdate",
    "RestaurantUpdate",
    "SalonCreate",
    "SalonRecord",
    "SalonUpdate",
    "TableInventory",
    "TimeWindow",
]
