"""
Validation of restaurant operating settings before they are persisted.

Every check runs before any write; the first failing rule raises a
BookingValidationError naming the offending field.
"""

import logging
from typing import Any, Dict, List, Optional

from core.utils_datetime import parse_hhmm
from domain.errors import BookingValidationError
from domain.models import RestaurantSettings, RestaurantSettingsUpdate, TimeWindow
from .capacity import theoretical_capacity


logger = logging.getLogger(__name__)

SLOT_FREQUENCY_STEP_MINUTES = 5


def validate_time_windows(windows: List[TimeWindow]) -> None:
    """
    Every window that declares both bounds must open before it closes.

    Raises:
        BookingValidationError: field `horaires`
    """
    for index, window in enumerate(windows):
        if not window.opening or not window.closing:
            continue
        try:
            opening = parse_hhmm(window.opening)
            closing = parse_hhmm(window.closing)
        except ValueError as e:
            raise BookingValidationError(
                f"Invalid opening window #{index + 1}: {e}",
                field="horaires",
            ) from e
        if opening >= closing:
            raise BookingValidationError(
                "Opening time must be earlier than closing time.",
                field="horaires",
            )


def validate_slot_frequency(frequency_minutes: int) -> None:
    """
    Slot frequency must be a positive multiple of 5 minutes.

    Raises:
        BookingValidationError: field `frequenceCreneauxMinutes`
    """
    if frequency_minutes <= 0 or frequency_minutes % SLOT_FREQUENCY_STEP_MINUTES != 0:
        raise BookingValidationError(
            "Slot frequency must be a positive number divisible by 5.",
            field="frequenceCreneauxMinutes",
        )


def validate_slot_limit(
    max_per_slot: int,
    total_capacity: Optional[int] = None,
    computed_capacity: Optional[int] = None,
) -> None:
    """
    The per-slot limit cannot exceed declared or theoretical capacity.

    Either bound is skipped when it is None.

    Raises:
        BookingValidationError: field `maxReservationsParCreneau`
    """
    if total_capacity is not None and max_per_slot > total_capacity:
        raise BookingValidationError(
            "The per-slot limit cannot exceed the total capacity.",
            field="maxReservationsParCreneau",
        )
    if computed_capacity is not None and max_per_slot > computed_capacity:
        raise BookingValidationError(
            "The per-slot limit cannot exceed the theoretical capacity.",
            field="maxReservationsParCreneau",
        )


def validate_settings_update(
    update: RestaurantSettingsUpdate,
    current: Optional[RestaurantSettings] = None,
) -> Dict[str, Any]:
    """
    Validate a settings update and compute the document changes to write.

    Only the fields present in `update` are checked. The declared total
    capacity bound comes from the update itself; the theoretical bound is
    enforced only when the update carries table inventory, against the new
    per-slot limit or else the stored one. When inventory changes,
    `capaciteTheorique` is recomputed from the new inventory, falling back
    to `current` for whichever of tables/customTables the update leaves out.

    Args:
        update: Partial settings input
        current: Settings currently stored on the restaurant

    Returns:
        Dict of settings keys (wire names) to merge into the stored settings

    Raises:
        BookingValidationError: On the first rule that fails
    """
    current = current or RestaurantSettings()

    if update.time_windows is not None:
        validate_time_windows(update.time_windows)

    if update.slot_frequency_minutes is not None:
        validate_slot_frequency(update.slot_frequency_minutes)

    changes = update.to_document(partial=True)

    inventory_changed = update.tables is not None or update.custom_tables is not None
    computed_capacity = None
    if inventory_changed:
        tables = update.tables if update.tables is not None else current.tables
        custom_tables = update.custom_tables if update.custom_tables is not None else current.custom_tables
        computed_capacity = theoretical_capacity(tables, custom_tables)
        changes["capaciteTheorique"] = computed_capacity

    # a new inventory is checked against the stored limit when no new one is sent
    slot_limit = update.max_reservations_per_slot
    if slot_limit is None and inventory_changed:
        slot_limit = current.max_reservations_per_slot

    if slot_limit is not None:
        validate_slot_limit(
            slot_limit,
            total_capacity=update.total_capacity,
            computed_capacity=computed_capacity,
        )

    logger.debug(f"Settings update validated: {sorted(changes)}")
    return changes
