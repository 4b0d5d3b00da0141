"""Check that a hotel stay falls inside one of the hotel's opening periods."""

import logging
from datetime import date
from typing import Iterable, Optional, Tuple

from domain.errors import BookingValidationError, HotelClosedError
from domain.models import OpeningPeriod


logger = logging.getLogger(__name__)


def stay_interval(
    check_in: Optional[date],
    check_out: Optional[date],
    on_date: Optional[date] = None,
) -> Tuple[date, date]:
    """
    Resolve the stay interval from checkIn/checkOut or a single date.

    A missing checkOut makes it a one-day stay.

    Raises:
        BookingValidationError: No start date, or checkOut before checkIn
    """
    start = check_in or on_date
    if start is None:
        raise BookingValidationError("A checkIn or date is required for hotel reservations.", field="checkIn")
    end = check_out or start
    if end < start:
        raise BookingValidationError("checkOut must not be earlier than checkIn.", field="checkOut")
    return start, end


def ensure_stay_within_opening_periods(
    opening_periods: Iterable[OpeningPeriod],
    check_in: Optional[date],
    check_out: Optional[date] = None,
    on_date: Optional[date] = None,
) -> None:
    """
    Reject stays not fully contained in at least one opening period.

    A hotel that declares no opening periods accepts any dates.

    Raises:
        HotelClosedError: The stay is outside every declared period
        BookingValidationError: The stay dates are missing or inverted
    """
    periods = list(opening_periods or [])
    start, end = stay_interval(check_in, check_out, on_date)

    if not periods:
        return

    for period in periods:
        if period.start_date <= start and end <= period.end_date:
            return

    logger.info(f"Rejected hotel stay {start.isoformat()}..{end.isoformat()}: outside opening periods")
    raise HotelClosedError()
