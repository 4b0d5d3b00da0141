"""
Per-guest price lookup and reservation totals.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from core.settings import settings
from core.utils_datetime import parse_hhmm
from domain.models import TimeWindow


logger = logging.getLogger(__name__)


def _window_fields(window: Union[TimeWindow, Mapping[str, Any]]):
    if isinstance(window, TimeWindow):
        return window.opening, window.closing, window.price
    return window.get("ouverture"), window.get("fermeture"), window.get("prix")


def resolve_price_per_guest(
    time_windows: Optional[Iterable[Union[TimeWindow, Mapping[str, Any]]]],
    reservation_time: str,
    default_price: Optional[float] = None,
) -> float:
    """
    Select the per-guest price for a reservation time.

    Windows are scanned in list order and the first one with
    `ouverture <= time < fermeture` wins, even if later windows overlap it.
    A matching window without a positive price, no match at all, or any
    parse error yields the default price. Errors are logged, never raised.

    Args:
        time_windows: Restaurant `horaires` entries
        reservation_time: "HH:MM"
        default_price: Fallback (settings.default_price_per_guest if None)

    Returns:
        Price per guest
    """
    if default_price is None:
        default_price = settings.default_price_per_guest

    try:
        minutes = parse_hhmm(reservation_time)
        for window in time_windows or []:
            opening, closing, price = _window_fields(window)
            if not opening or not closing:
                continue
            if parse_hhmm(opening) <= minutes < parse_hhmm(closing):
                if isinstance(price, (int, float)) and price > 0:
                    return float(price)
                break
    except (ValueError, TypeError, AttributeError) as e:
        logger.error(
            f"Error computing price per guest for {reservation_time!r}, using default {default_price}: {e}",
            exc_info=True,
        )

    return float(default_price)


def compute_standard_total(party_size: int, price_per_guest: float) -> float:
    """Standard reservation total: party size × per-guest price."""
    return party_size * price_per_guest


def compute_privatisation_total(party_size: int, rate_per_guest: Optional[float] = None) -> float:
    """
    Privatisation total at the flat per-guest rate.

    Any tariff configured on the privatisation option is not consulted.
    """
    if rate_per_guest is None:
        rate_per_guest = settings.privatisation_price_per_guest
    return party_size * rate_per_guest
