"""
DateTime utilities for business hours, slot times and stay intervals.
"""
from datetime import datetime, date, timedelta
from typing import Iterator, Optional
import re
import pytz


# Default timezone for timestamps stored on documents
TIMEZONE = pytz.UTC

# "HH:MM" with 1 or 2 digit hours
HHMM_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})$')

MINUTES_PER_DAY = 24 * 60

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def get_current_datetime(tz_name: Optional[str] = None) -> datetime:
    """Get current datetime, in the given timezone or UTC."""
    tz = pytz.timezone(tz_name) if tz_name else TIMEZONE
    return datetime.now(tz)


def parse_hhmm(value: str) -> int:
    """
    Parse an "HH:MM" string into minutes since midnight.

    Raises:
        ValueError: if the string is not a valid time of day
    """
    if not isinstance(value, str):
        raise ValueError(f"Time must be a string in HH:MM format (got {value!r})")

    match = HHMM_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Time must be in HH:MM format (got {value!r})")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"Time out of range: {value!r}")

    return hours * 60 + minutes


def format_hhmm(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM"."""
    minutes = minutes % MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def weekday_name(day: date) -> str:
    """English weekday name for a date ("Monday" ... "Sunday")."""
    return WEEKDAY_NAMES[day.weekday()]


def iter_slot_minutes(open_minutes: int, close_minutes: int, step_minutes: int) -> Iterator[int]:
    """Yield slot start minutes from open (inclusive) to close (exclusive)."""
    if step_minutes <= 0:
        raise ValueError("Slot step must be positive")
    current = open_minutes
    while current < close_minutes:
        yield current
        current += step_minutes


def stay_nights(check_in: date, check_out: Optional[date]) -> int:
    """Number of billable nights for a stay; a single-date stay counts as one."""
    if check_out is None:
        return 1
    return max((check_out - check_in) // timedelta(days=1), 1)
