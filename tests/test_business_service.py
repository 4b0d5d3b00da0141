"""Unit tests for business management and restaurant settings updates."""
import pytest

from domain.enums import BusinessType
from domain.errors import BookingValidationError, BusinessNotFoundError
from domain.models import HotelUpdate, RestaurantCreate, RestaurantUpdate


@pytest.mark.unit
class TestBusinessCRUD:
    """Test create/get/list/deactivate."""

    def test_restaurant_settings_defaults(self, business_service):
        restaurant = business_service.create(BusinessType.RESTAURANT, RestaurantCreate(name="Bistro"))

        settings = restaurant.settings
        assert settings.currency == "USD"
        assert settings.slot_frequency_minutes == 30
        assert settings.max_reservations_per_slot == 10
        assert settings.max_party_size == 10
        assert settings.time_windows == []
        assert settings.theoretical_capacity == 0

    def test_get_unknown(self, business_service):
        with pytest.raises(BusinessNotFoundError, match="Restaurant not found."):
            business_service.get(BusinessType.RESTAURANT, "missing")

    def test_types_are_separate_collections(self, business_service, hotel):
        with pytest.raises(BusinessNotFoundError):
            business_service.get(BusinessType.SALON, hotel.id)

    def test_list_hides_deactivated(self, business_service, hotel):
        assert [h.id for h in business_service.list(BusinessType.HOTEL)] == [hotel.id]

        assert business_service.deactivate(BusinessType.HOTEL, hotel.id) is True

        assert business_service.list(BusinessType.HOTEL) == []
        assert business_service.get(BusinessType.HOTEL, hotel.id).is_active is False

    def test_deactivate_unknown(self, business_service):
        with pytest.raises(BusinessNotFoundError):
            business_service.deactivate(BusinessType.SALON, "missing")

    def test_update_hotel_opening_periods(self, business_service, hotel):
        updated = business_service.update(
            BusinessType.HOTEL,
            hotel.id,
            HotelUpdate.model_validate({"openingPeriods": [{"startDate": "2024-07-01", "endDate": "2024-07-31"}]}),
        )
        assert len(updated.opening_periods) == 1
        assert updated.opening_periods[0].start_date.month == 7
        assert updated.name == "Hotel du Lac"


@pytest.mark.unit
class TestUpdateRestaurantSettings:
    """Test settings validation on updateRestaurant."""

    def test_settings_merged_and_capacity_stored(self, business_service, restaurant):
        updated = business_service.update_restaurant(
            restaurant.id,
            RestaurantUpdate.model_validate({
                "settings": {"tables": {"size2": 2, "size4": 1, "size6": 0, "size8": 0},
                             "maxReservationsParCreneau": 5},
            }),
        )

        assert updated.settings.theoretical_capacity == 8
        assert updated.settings.max_reservations_per_slot == 5
        # untouched keys survive the merge
        assert len(updated.settings.time_windows) == 2
        assert updated.settings.total_capacity == 40

    def test_invalid_window_not_persisted(self, business_service, restaurant):
        with pytest.raises(BookingValidationError) as exc_info:
            business_service.update_restaurant(
                restaurant.id,
                RestaurantUpdate.model_validate({
                    "name": "Renamed",
                    "settings": {"horaires": [{"ouverture": "15:00", "fermeture": "11:00"}]},
                }),
            )

        assert exc_info.value.field == "horaires"
        stored = business_service.get(BusinessType.RESTAURANT, restaurant.id)
        assert stored.name == "Chez Paul"
        assert len(stored.settings.time_windows) == 2

    def test_invalid_frequency(self, business_service, restaurant):
        with pytest.raises(BookingValidationError) as exc_info:
            business_service.update_restaurant(
                restaurant.id,
                RestaurantUpdate.model_validate({"settings": {"frequenceCreneauxMinutes": 12}}),
            )
        assert exc_info.value.field == "frequenceCreneauxMinutes"

    def test_limit_above_total_capacity(self, business_service, restaurant):
        with pytest.raises(BookingValidationError) as exc_info:
            business_service.update_restaurant(
                restaurant.id,
                RestaurantUpdate.model_validate({
                    "settings": {"capaciteTotale": 6, "maxReservationsParCreneau": 7},
                }),
            )
        assert exc_info.value.field == "maxReservationsParCreneau"

    def test_update_unknown_restaurant(self, business_service):
        with pytest.raises(BusinessNotFoundError):
            business_service.update_restaurant("missing", RestaurantUpdate(name="x"))

    def test_plain_fields_update(self, business_service, restaurant):
        updated = business_service.update_restaurant(
            restaurant.id,
            RestaurantUpdate.model_validate({"cuisine": ["French"], "priceRange": "$$$"}),
        )
        assert updated.cuisine == ["French"]
        assert updated.price_range == "$$$"
        assert updated.settings.max_reservations_per_slot == 3

    def test_inventory_below_stored_limit_not_persisted(self, business_service, restaurant):
        with pytest.raises(BookingValidationError) as exc_info:
            business_service.update_restaurant(
                restaurant.id,
                RestaurantUpdate.model_validate({"settings": {"tables": {"size2": 1}}}),
            )

        assert exc_info.value.field == "maxReservationsParCreneau"
        stored = business_service.get(BusinessType.RESTAURANT, restaurant.id)
        assert stored.settings.tables.size2 == 2
        assert stored.settings.max_reservations_per_slot == 3


@pytest.mark.unit
class TestNullFieldsInUpdates:
    """Test that explicit nulls leave stored values untouched."""

    def test_null_name_keeps_name(self, business_service, restaurant):
        updated = business_service.update_restaurant(
            restaurant.id,
            RestaurantUpdate.model_validate({"name": None, "priceRange": "$$"}),
        )

        assert updated.name == "Chez Paul"
        assert updated.price_range == "$$"
        assert business_service.get(BusinessType.RESTAURANT, restaurant.id).name == "Chez Paul"

    def test_null_time_windows_keep_windows(self, business_service, restaurant):
        updated = business_service.update_restaurant(
            restaurant.id,
            RestaurantUpdate.model_validate({"settings": {"horaires": None, "frequenceCreneauxMinutes": 15}}),
        )

        assert len(updated.settings.time_windows) == 2
        assert updated.settings.slot_frequency_minutes == 15
        stored = business_service.get(BusinessType.RESTAURANT, restaurant.id)
        assert stored.settings.time_windows[1].price == 70

    def test_null_settings_keep_settings(self, business_service, restaurant):
        updated = business_service.update_restaurant(
            restaurant.id,
            RestaurantUpdate.model_validate({"settings": None}),
        )

        assert updated.settings.max_reservations_per_slot == 3
        assert len(updated.settings.time_windows) == 2

    def test_null_hotel_name(self, business_service, hotel):
        updated = business_service.update(
            BusinessType.HOTEL,
            hotel.id,
            HotelUpdate.model_validate({"name": None}),
        )
        assert updated.name == "Hotel du Lac"
