"""Domain exceptions raised by the booking services."""

from typing import Optional

from .enums import ErrorCode


class BookingPlatformError(Exception):
    """Base class for errors surfaced to API callers."""

    code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR
    status_code: int = 500

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_graphql_error(self) -> dict:
        """Render as a GraphQL-style error entry."""
        extensions = {"code": self.code.value}
        if self.field:
            extensions["field"] = self.field
        return {"message": self.message, "extensions": extensions}


class BookingValidationError(BookingPlatformError):
    """User-correctable input error; nothing is persisted."""

    code = ErrorCode.BAD_USER_INPUT
    status_code = 400


class HotelClosedError(BookingValidationError):
    """Requested stay is outside every declared hotel opening period."""

    def __init__(self, message: str = "Hotel is not open for the selected dates"):
        super().__init__(message, field="checkIn")


class NotFoundError(BookingPlatformError):
    """Referenced document does not exist."""

    code = ErrorCode.NOT_FOUND
    status_code = 404


class DocumentNotFoundError(NotFoundError):
    """Raised by the document store for an unknown id."""
    pass


class BusinessNotFoundError(NotFoundError):
    """Raised when a referenced hotel, restaurant or salon is missing."""
    pass


class ReservationNotFoundError(NotFoundError):
    """Raised when a reservation is not found."""
    pass


class InvoiceNotFoundError(NotFoundError):
    """Raised when an invoice is not found."""
    pass


class PrivatisationOptionNotFoundError(NotFoundError):
    """Raised when a privatisation option is not found."""
    pass


class StoreError(BookingPlatformError):
    """The document store failed to complete an operation."""

    code = ErrorCode.INTERNAL_SERVER_ERROR
    status_code = 500
