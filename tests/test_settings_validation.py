"""Unit tests for restaurant settings validation and capacity."""
import pytest

from domain.errors import BookingValidationError
from domain.models import (
    CustomTable,
    RestaurantSettings,
    RestaurantSettingsUpdate,
    TableInventory,
    TimeWindow,
)
from services.capacity import theoretical_capacity
from services.settings_validation import (
    validate_settings_update,
    validate_slot_frequency,
    validate_slot_limit,
    validate_time_windows,
)


@pytest.mark.unit
class TestTheoreticalCapacity:
    """Test capacity derived from table inventory."""

    def test_standard_tables(self):
        """2 tables of 2 and 1 table of 4 seat 8."""
        tables = TableInventory(size2=2, size4=1, size6=0, size8=0)
        assert theoretical_capacity(tables, []) == 8

    def test_accepts_plain_documents(self):
        assert theoretical_capacity({"size2": 2, "size4": 1}, []) == 8

    def test_custom_tables_are_added(self):
        tables = TableInventory(size8=1)
        custom = [CustomTable(size=10, count=2), {"taille": 3, "nombre": 1}]
        assert theoretical_capacity(tables, custom) == 8 + 20 + 3

    def test_empty_inventory(self):
        assert theoretical_capacity() == 0
        assert theoretical_capacity(None, None) == 0

    def test_result_is_integer(self):
        result = theoretical_capacity(TableInventory(size2=3, size6=1))
        assert isinstance(result, int)
        assert result == 12


@pytest.mark.unit
class TestTimeWindows:
    """Test opening window validation."""

    @pytest.mark.parametrize("opening,closing", [
        ("12:00", "12:00"),
        ("18:00", "09:00"),
        ("23:59", "00:00"),
    ])
    def test_open_not_before_close_rejected(self, opening, closing):
        with pytest.raises(BookingValidationError) as exc_info:
            validate_time_windows([TimeWindow(opening=opening, closing=closing)])
        assert exc_info.value.field == "horaires"

    def test_rejects_any_bad_window_in_list(self):
        windows = [
            TimeWindow(opening="09:00", closing="12:00"),
            TimeWindow(opening="20:00", closing="19:00"),
        ]
        with pytest.raises(BookingValidationError) as exc_info:
            validate_time_windows(windows)
        assert exc_info.value.field == "horaires"

    def test_unparseable_window_rejected(self):
        with pytest.raises(BookingValidationError) as exc_info:
            validate_time_windows([TimeWindow(opening="9h", closing="12:00")])
        assert exc_info.value.field == "horaires"

    def test_valid_windows_pass(self):
        validate_time_windows([
            TimeWindow(opening="09:00", closing="12:00", price=50),
            TimeWindow(opening="12:00", closing="18:00", price=70),
        ])

    def test_incomplete_window_ignored(self):
        validate_time_windows([TimeWindow(opening="09:00")])


@pytest.mark.unit
class TestSlotFrequency:
    """Test slot frequency rules."""

    @pytest.mark.parametrize("frequency", [0, -5, 7, 12, 31])
    def test_invalid_frequency_rejected(self, frequency):
        with pytest.raises(BookingValidationError) as exc_info:
            validate_slot_frequency(frequency)
        assert exc_info.value.field == "frequenceCreneauxMinutes"

    @pytest.mark.parametrize("frequency", [5, 15, 30, 60])
    def test_multiples_of_five_pass(self, frequency):
        validate_slot_frequency(frequency)


@pytest.mark.unit
class TestSlotLimit:
    """Test the per-slot reservation limit against capacity."""

    def test_exceeds_total_capacity(self):
        with pytest.raises(BookingValidationError) as exc_info:
            validate_slot_limit(25, total_capacity=20)
        assert exc_info.value.field == "maxReservationsParCreneau"
        assert "total capacity" in exc_info.value.message

    def test_exceeds_theoretical_capacity(self):
        with pytest.raises(BookingValidationError) as exc_info:
            validate_slot_limit(10, total_capacity=50, computed_capacity=8)
        assert exc_info.value.field == "maxReservationsParCreneau"
        assert "theoretical capacity" in exc_info.value.message

    def test_within_bounds(self):
        validate_slot_limit(8, total_capacity=8, computed_capacity=8)

    def test_missing_bounds_skipped(self):
        validate_slot_limit(100)


@pytest.mark.unit
class TestSettingsUpdate:
    """Test validation of a full settings update."""

    def test_recomputes_theoretical_capacity(self):
        update = RestaurantSettingsUpdate.model_validate({
            "tables": {"size2": 2, "size4": 1, "size6": 0, "size8": 0},
        })
        current = RestaurantSettings(max_reservations_per_slot=5)
        changes = validate_settings_update(update, current)
        assert changes["capaciteTheorique"] == 8
        assert changes["tables"]["size2"] == 2

    def test_only_set_fields_are_returned(self):
        update = RestaurantSettingsUpdate.model_validate({"frequenceCreneauxMinutes": 15})
        changes = validate_settings_update(update)
        assert changes == {"frequenceCreneauxMinutes": 15}

    def test_limit_above_declared_capacity_rejected(self):
        update = RestaurantSettingsUpdate.model_validate({
            "capaciteTotale": 10,
            "maxReservationsParCreneau": 11,
        })
        with pytest.raises(BookingValidationError) as exc_info:
            validate_settings_update(update)
        assert exc_info.value.field == "maxReservationsParCreneau"

    def test_limit_above_theoretical_capacity_rejected(self):
        update = RestaurantSettingsUpdate.model_validate({
            "capaciteTotale": 100,
            "maxReservationsParCreneau": 9,
            "tables": {"size2": 2, "size4": 1},
        })
        with pytest.raises(BookingValidationError) as exc_info:
            validate_settings_update(update)
        assert exc_info.value.field == "maxReservationsParCreneau"

    def test_theoretical_check_skipped_without_inventory(self):
        update = RestaurantSettingsUpdate.model_validate({
            "capaciteTotale": 100,
            "maxReservationsParCreneau": 50,
        })
        changes = validate_settings_update(update)
        assert "capaciteTheorique" not in changes

    def test_inventory_below_stored_limit_rejected(self):
        current = RestaurantSettings(max_reservations_per_slot=10)
        update = RestaurantSettingsUpdate.model_validate({"tables": {"size2": 1}})
        with pytest.raises(BookingValidationError) as exc_info:
            validate_settings_update(update, current)
        assert exc_info.value.field == "maxReservationsParCreneau"

    def test_inventory_checked_against_new_limit_over_stored(self):
        current = RestaurantSettings(max_reservations_per_slot=10)
        update = RestaurantSettingsUpdate.model_validate({
            "tables": {"size2": 1},
            "maxReservationsParCreneau": 2,
        })
        changes = validate_settings_update(update, current)
        assert changes["capaciteTheorique"] == 2
        assert changes["maxReservationsParCreneau"] == 2

    def test_null_fields_are_left_out(self):
        update = RestaurantSettingsUpdate.model_validate({
            "horaires": None,
            "frequenceCreneauxMinutes": 15,
        })
        assert validate_settings_update(update) == {"frequenceCreneauxMinutes": 15}

    def test_missing_inventory_part_taken_from_current(self):
        current = RestaurantSettings.model_validate({"customTables": [{"taille": 10, "nombre": 1}]})
        update = RestaurantSettingsUpdate.model_validate({"tables": {"size4": 1}})
        changes = validate_settings_update(update, current)
        assert changes["capaciteTheorique"] == 14

    def test_windows_checked_before_frequency(self):
        update = RestaurantSettingsUpdate.model_validate({
            "horaires": [{"ouverture": "14:00", "fermeture": "10:00"}],
            "frequenceCreneauxMinutes": 7,
        })
        with pytest.raises(BookingValidationError) as exc_info:
            validate_settings_update(update)
        assert exc_info.value.field == "horaires"
