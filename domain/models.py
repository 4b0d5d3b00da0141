"""Domain models using Pydantic v2 for the hospitality booking platform.

Attribute names are snake_case; aliases carry the document/wire keys shared
with the web frontend (camelCase, and the French restaurant settings keys).
"""

import datetime as dt
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils_datetime import format_hhmm, parse_hhmm

from .enums import BusinessType, DayOfWeek, InvoiceStatus, ReservationStatus


HHMM_REGEX = r"^\d{1,2}:\d{2}$"


class DocumentModel(BaseModel):
    """Base for every model that is stored in, or read from, the document store."""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    def to_document(self, partial: bool = False) -> Dict[str, Any]:
        """
        Serialize with wire keys.

        With `partial`, only top-level fields that were explicitly set to a
        non-null value are kept; an explicit null leaves the stored value as it
        is. Each kept value is serialized whole, nested defaults included.
        """
        document = self.model_dump(mode="json", by_alias=True)
        if not partial:
            return document
        fields = type(self).model_fields
        keys = {fields[name].alias or name for name in self.model_fields_set}
        return {
            key: value for key, value in document.items()
            if key in keys and value is not None
        }


class StoredDocument(DocumentModel):
    """Fields the document store adds to every record."""

    id: str
    created_at: Optional[dt.datetime] = Field(None, alias="createdAt")
    updated_at: Optional[dt.datetime] = Field(None, alias="updatedAt")


# ============================================================================
# Restaurant settings
# ============================================================================

class TimeWindow(DocumentModel):
    """Opening window with an optional per-guest price."""

    opening: Optional[str] = Field(None, alias="ouverture", description="HH:MM")
    closing: Optional[str] = Field(None, alias="fermeture", description="HH:MM")
    price: float = Field(0, alias="prix", description="Per-guest price; <= 0 means unset")


class TableInventory(DocumentModel):
    """Counts of standard-size tables."""

    size2: int = Field(0, ge=0)
    size4: int = Field(0, ge=0)
    size6: int = Field(0, ge=0)
    size8: int = Field(0, ge=0)


class CustomTable(DocumentModel):
    """Non-standard table size and how many of them exist."""

    size: int = Field(..., alias="taille", ge=1)
    count: int = Field(..., alias="nombre", ge=0)


class ClosurePeriod(DocumentModel):
    """Closure (holidays, annual closing), inclusive on both ends."""

    start: dt.date = Field(..., alias="debut")
    end: dt.date = Field(..., alias="fin")


class RestaurantSettings(DocumentModel):
    """Operating configuration of a restaurant, as stored."""

    currency: str = "USD"
    timezone: str = "UTC"
    tax_rate: float = Field(0, alias="taxRate", ge=0)
    service_fee: float = Field(0, alias="serviceFee", ge=0)
    max_party_size: int = Field(10, alias="maxPartySize", ge=1)
    reservation_window: int = Field(60, alias="reservationWindow", ge=0)
    cancellation_hours: int = Field(2, alias="cancellationHours", ge=0)
    time_windows: List[TimeWindow] = Field(default_factory=list, alias="horaires")
    total_capacity: int = Field(0, alias="capaciteTotale", ge=0)
    tables: TableInventory = Field(default_factory=TableInventory)
    slot_frequency_minutes: int = Field(30, alias="frequenceCreneauxMinutes")
    max_reservations_per_slot: int = Field(10, alias="maxReservationsParCreneau")
    theoretical_capacity: int = Field(0, alias="capaciteTheorique", ge=0)
    closures: List[ClosurePeriod] = Field(default_factory=list, alias="fermetures")
    open_days: List[DayOfWeek] = Field(default_factory=list, alias="joursOuverts")
    custom_tables: List[CustomTable] = Field(default_factory=list, alias="customTables")


class RestaurantSettingsUpdate(DocumentModel):
    """Partial settings input; only fields that are set are validated and written."""

    currency: Optional[str] = None
    timezone: Optional[str] = None
    tax_rate: Optional[float] = Field(None, alias="taxRate", ge=0)
    service_fee: Optional[float] = Field(None, alias="serviceFee", ge=0)
    max_party_size: Optional[int] = Field(None, alias="maxPartySize", ge=1)
    reservation_window: Optional[int] = Field(None, alias="reservationWindow", ge=0)
    cancellation_hours: Optional[int] = Field(None, alias="cancellationHours", ge=0)
    time_windows: Optional[List[TimeWindow]] = Field(None, alias="horaires")
    total_capacity: Optional[int] = Field(None, alias="capaciteTotale", ge=0)
    tables: Optional[TableInventory] = None
    slot_frequency_minutes: Optional[int] = Field(None, alias="frequenceCreneauxMinutes")
    max_reservations_per_slot: Optional[int] = Field(None, alias="maxReservationsParCreneau")
    closures: Optional[List[ClosurePeriod]] = Field(None, alias="fermetures")
    open_days: Optional[List[DayOfWeek]] = Field(None, alias="joursOuverts")
    custom_tables: Optional[List[CustomTable]] = Field(None, alias="customTables")


# ============================================================================
# Businesses
# ============================================================================

class Address(DocumentModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = Field(None, alias="zipCode")
    country: Optional[str] = None


class Contact(DocumentModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


class OpeningPeriod(DocumentModel):
    """Date range during which a hotel accepts stays."""

    start_date: dt.date = Field(..., alias="startDate")
    end_date: dt.date = Field(..., alias="endDate")


class BusinessBase(DocumentModel):
    """Fields shared by hotels, restaurants and salons."""

    client_id: Optional[str] = Field(None, alias="clientId")
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    address: Address = Field(default_factory=Address)
    contact: Contact = Field(default_factory=Contact)
    images: List[str] = Field(default_factory=list)
    is_active: bool = Field(True, alias="isActive")


class RestaurantCreate(BusinessBase):
    settings: RestaurantSettings = Field(default_factory=RestaurantSettings)
    cuisine: List[str] = Field(default_factory=list)
    price_range: str = Field("$$", alias="priceRange", pattern=r"^\${1,4}$")
    features: List[str] = Field(default_factory=list)


class HotelCreate(BusinessBase):
    opening_periods: List[OpeningPeriod] = Field(default_factory=list, alias="openingPeriods")
    amenities: List[str] = Field(default_factory=list)
    star_rating: Optional[int] = Field(None, alias="starRating", ge=1, le=5)


class SalonCreate(BusinessBase):
    specialties: List[str] = Field(default_factory=list)


class BusinessUpdate(DocumentModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    address: Optional[Address] = None
    contact: Optional[Contact] = None
    images: Optional[List[str]] = None
    is_active: Optional[bool] = Field(None, alias="isActive")


class RestaurantUpdate(BusinessUpdate):
    settings: Optional[RestaurantSettingsUpdate] = None
    cuisine: Optional[List[str]] = None
    price_range: Optional[str] = Field(None, alias="priceRange", pattern=r"^\${1,4}$")
    features: Optional[List[str]] = None


class HotelUpdate(BusinessUpdate):
    opening_periods: Optional[List[OpeningPeriod]] = Field(None, alias="openingPeriods")
    amenities: Optional[List[str]] = None
    star_rating: Optional[int] = Field(None, alias="starRating", ge=1, le=5)


class SalonUpdate(BusinessUpdate):
    specialties: Optional[List[str]] = None


class RestaurantRecord(StoredDocument, RestaurantCreate):
    pass


class HotelRecord(StoredDocument, HotelCreate):
    pass


class SalonRecord(StoredDocument, SalonCreate):
    pass


# ============================================================================
# Reservations
# ============================================================================

class ReservationTimeInput(DocumentModel):
    """Normalizes the reservation `time` field to zero-padded "HH:MM"."""

    @field_validator("time", check_fields=False)
    @classmethod
    def normalize_time(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return format_hhmm(parse_hhmm(v))


class CustomerInfo(DocumentModel):
    name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = None
    phone: Optional[str] = None


class ReservationCreate(ReservationTimeInput):
    """Generic reservation input for any business type. No client-side total."""

    business_id: str = Field(..., alias="businessId", min_length=1)
    business_type: BusinessType = Field(..., alias="businessType")
    party_size: int = Field(1, alias="partySize", ge=1)
    date: Optional[dt.date] = None
    time: Optional[str] = Field(None, pattern=HHMM_REGEX)
    check_in: Optional[dt.date] = Field(None, alias="checkIn")
    check_out: Optional[dt.date] = Field(None, alias="checkOut")
    status: ReservationStatus = ReservationStatus.PENDING
    duration: Optional[float] = Field(None, gt=0)
    notes: Optional[str] = Field(None, max_length=1000)
    special_requests: Optional[str] = Field(None, alias="specialRequests", max_length=1000)
    customer_id: Optional[str] = Field(None, alias="customerId")
    customer_info: Optional[CustomerInfo] = Field(None, alias="customerInfo")
    room_id: Optional[str] = Field(None, alias="roomId")
    table_id: Optional[str] = Field(None, alias="tableId")
    service_id: Optional[str] = Field(None, alias="serviceId")
    staff_id: Optional[str] = Field(None, alias="staffId")


class RestaurantReservationCreate(ReservationTimeInput):
    """Standard restaurant booking (createReservationV2)."""

    restaurant_id: str = Field(..., alias="restaurantId", min_length=1)
    guests: int = Field(..., alias="personnes", ge=1)
    time: str = Field(..., alias="heure", pattern=HHMM_REGEX)
    date: dt.date
    seating_area: Optional[str] = Field(None, alias="emplacement")
    notes: Optional[str] = Field(None, max_length=1000)
    special_requests: Optional[str] = Field(None, alias="specialRequests", max_length=1000)
    customer_id: Optional[str] = Field(None, alias="customerId")
    customer_info: Optional[CustomerInfo] = Field(None, alias="customerInfo")


class PrivatisationReservationCreate(ReservationTimeInput):
    """Exclusive-use restaurant booking (createPrivatisationV2)."""

    restaurant_id: str = Field(..., alias="restaurantId", min_length=1)
    guests: int = Field(..., alias="personnes", ge=1)
    time: str = Field(..., alias="heure", pattern=HHMM_REGEX)
    date: dt.date
    type: str = Field(..., min_length=1, description="Privatisation option name")
    space: str = Field("Salle entière", alias="espace")
    menu: Optional[str] = None
    duration_hours: Optional[float] = Field(None, alias="dureeHeures", gt=0)
    customer_id: Optional[str] = Field(None, alias="customerId")
    customer_info: Optional[CustomerInfo] = Field(None, alias="customerInfo")


class ReservationUpdate(ReservationTimeInput):
    """Partial reservation update. The total is server-owned and not accepted here."""

    party_size: Optional[int] = Field(None, alias="partySize", ge=1)
    date: Optional[dt.date] = None
    time: Optional[str] = Field(None, pattern=HHMM_REGEX)
    check_in: Optional[dt.date] = Field(None, alias="checkIn")
    check_out: Optional[dt.date] = Field(None, alias="checkOut")
    status: Optional[ReservationStatus] = None
    duration: Optional[float] = Field(None, gt=0)
    notes: Optional[str] = Field(None, max_length=1000)
    special_requests: Optional[str] = Field(None, alias="specialRequests", max_length=1000)
    customer_info: Optional[CustomerInfo] = Field(None, alias="customerInfo")
    room_id: Optional[str] = Field(None, alias="roomId")
    table_id: Optional[str] = Field(None, alias="tableId")
    service_id: Optional[str] = Field(None, alias="serviceId")
    staff_id: Optional[str] = Field(None, alias="staffId")


class ReservationRecord(StoredDocument):
    """Complete reservation document."""

    business_id: str = Field(..., alias="businessId")
    business_type: BusinessType = Field(..., alias="businessType")
    party_size: int = Field(..., alias="partySize")
    date: Optional[dt.date] = None
    time: Optional[str] = None
    check_in: Optional[dt.date] = Field(None, alias="checkIn")
    check_out: Optional[dt.date] = Field(None, alias="checkOut")
    status: ReservationStatus
    total_amount: float = Field(0, alias="totalAmount")
    duration: Optional[float] = None
    seating_area: Optional[str] = Field(None, alias="emplacement")
    notes: Optional[str] = None
    special_requests: Optional[str] = Field(None, alias="specialRequests")
    customer_id: Optional[str] = Field(None, alias="customerId")
    customer_info: Optional[CustomerInfo] = Field(None, alias="customerInfo")
    room_id: Optional[str] = Field(None, alias="roomId")
    table_id: Optional[str] = Field(None, alias="tableId")
    service_id: Optional[str] = Field(None, alias="serviceId")
    staff_id: Optional[str] = Field(None, alias="staffId")


class AvailabilitySlot(DocumentModel):
    """Bookable time slot for a given date."""

    time: str
    available: bool
    booked: int = 0
    remaining: int = 0


# ============================================================================
# Invoices
# ============================================================================

class InvoiceItem(DocumentModel):
    description: str
    price: float
    quantity: int = Field(1, ge=1)
    total: float


class InvoiceRecord(StoredDocument):
    reservation_id: str = Field(..., alias="reservationId")
    business_id: str = Field(..., alias="businessId")
    items: List[InvoiceItem] = Field(default_factory=list)
    total: float
    date: Optional[dt.date] = None
    status: InvoiceStatus = InvoiceStatus.ISSUED


# ============================================================================
# Privatisation options
# ============================================================================

class MenuDetail(DocumentModel):
    name: str = Field(..., alias="nom", min_length=1)
    description: Optional[str] = None
    price: float = Field(..., alias="prix", ge=0)


class PrivatisationOptionCreate(DocumentModel):
    name: str = Field(..., alias="nom", min_length=1)
    description: Optional[str] = None
    type: str = Field(..., min_length=1)
    max_capacity: int = Field(..., alias="capaciteMaximale", ge=1)
    max_duration_hours: int = Field(..., alias="dureeMaximaleHeures", ge=1)
    group_menus: List[str] = Field(default_factory=list, alias="menusDeGroupe")
    menu_details: List[MenuDetail] = Field(default_factory=list, alias="menusDetails")
    tariff: Optional[float] = Field(None, alias="tarif", ge=0)
    conditions: Optional[str] = None
    restaurant_id: str = Field(..., alias="restaurantId", min_length=1)


class PrivatisationOptionUpdate(DocumentModel):
    name: Optional[str] = Field(None, alias="nom", min_length=1)
    description: Optional[str] = None
    type: Optional[str] = Field(None, min_length=1)
    max_capacity: Optional[int] = Field(None, alias="capaciteMaximale", ge=1)
    max_duration_hours: Optional[int] = Field(None, alias="dureeMaximaleHeures", ge=1)
    group_menus: Optional[List[str]] = Field(None, alias="menusDeGroupe")
    menu_details: Optional[List[MenuDetail]] = Field(None, alias="menusDetails")
    tariff: Optional[float] = Field(None, alias="tarif", ge=0)
    conditions: Optional[str] = None


class PrivatisationOptionRecord(StoredDocument, PrivatisationOptionCreate):
    pass


# ============================================================================
# Catalog: salon services, staff, restaurant tables, hotel rooms
# ============================================================================

class ServiceCreate(DocumentModel):
    business_id: str = Field(..., alias="businessId", min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    duration_minutes: int = Field(30, alias="durationMinutes", ge=5, le=480)
    price: float = Field(0, ge=0)
    category: Optional[str] = None
    is_active: bool = Field(True, alias="isActive")


class ServiceUpdate(DocumentModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    duration_minutes: Optional[int] = Field(None, alias="durationMinutes", ge=5, le=480)
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = None
    is_active: Optional[bool] = Field(None, alias="isActive")


class ServiceRecord(StoredDocument, ServiceCreate):
    pass


class StaffCreate(DocumentModel):
    business_id: str = Field(..., alias="businessId", min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = None
    phone: Optional[str] = None
    roles: List[str] = Field(default_factory=list)
    service_ids: List[str] = Field(default_factory=list, alias="serviceIds")
    is_active: bool = Field(True, alias="isActive")


class StaffUpdate(DocumentModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = None
    phone: Optional[str] = None
    roles: Optional[List[str]] = None
    service_ids: Optional[List[str]] = Field(None, alias="serviceIds")
    is_active: Optional[bool] = Field(None, alias="isActive")


class StaffRecord(StoredDocument, StaffCreate):
    pass


class TableCreate(DocumentModel):
    business_id: str = Field(..., alias="businessId", min_length=1)
    number: int = Field(..., ge=1)
    capacity: int = Field(..., ge=1)
    location: Optional[str] = None
    is_active: bool = Field(True, alias="isActive")


class TableUpdate(DocumentModel):
    number: Optional[int] = Field(None, ge=1)
    capacity: Optional[int] = Field(None, ge=1)
    location: Optional[str] = None
    is_active: Optional[bool] = Field(None, alias="isActive")


class TableRecord(StoredDocument, TableCreate):
    pass


class RoomCreate(DocumentModel):
    business_id: str = Field(..., alias="businessId", min_length=1)
    number: str = Field(..., min_length=1)
    type: str = "standard"
    capacity: int = Field(2, ge=1)
    price_per_night: float = Field(0, alias="pricePerNight", ge=0)
    is_active: bool = Field(True, alias="isActive")


class RoomUpdate(DocumentModel):
    number: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=1)
    price_per_night: Optional[float] = Field(None, alias="pricePerNight", ge=0)
    is_active: Optional[bool] = Field(None, alias="isActive")


class RoomRecord(StoredDocument, RoomCreate):
    pass
