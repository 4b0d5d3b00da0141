"""
Business service for hotels, restaurants and salons.
Plain persistence, except restaurant settings which are validated first.
"""
import logging
from typing import Dict, List, Type, Union

from db.store import DocumentStore
from domain.enums import BusinessType
from domain.errors import BusinessNotFoundError
from domain.models import (
    BusinessBase,
    BusinessUpdate,
    HotelRecord,
    RestaurantRecord,
    RestaurantUpdate,
    SalonRecord,
    StoredDocument,
)
from .settings_validation import validate_settings_update


logger = logging.getLogger(__name__)

BusinessRecord = Union[HotelRecord, RestaurantRecord, SalonRecord]

RECORD_MODELS: Dict[BusinessType, Type[StoredDocument]] = {
    BusinessType.HOTEL: HotelRecord,
    BusinessType.RESTAURANT: RestaurantRecord,
    BusinessType.SALON: SalonRecord,
}


class BusinessService:
    """Service for managing tenant businesses."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def create(self, business_type: BusinessType, data: BusinessBase) -> BusinessRecord:
        """Persist a new business of the given type."""
        document = self.store.create(business_type.collection, data.to_document())
        logger.info(f"Created {business_type.value} {document['id']}")
        return RECORD_MODELS[business_type].model_validate(document)

    def get(self, business_type: BusinessType, business_id: str) -> BusinessRecord:
        """
        Get a business by ID.

        Raises:
            BusinessNotFoundError: If the business does not exist
        """
        document = self.store.find_by_id(business_type.collection, business_id)
        if document is None:
            raise BusinessNotFoundError(
                f"{business_type.value.capitalize()} not found.",
                field="id",
            )
        return RECORD_MODELS[business_type].model_validate(document)

    def list(self, business_type: BusinessType) -> List[BusinessRecord]:
        """List active businesses of a type."""
        model = RECORD_MODELS[business_type]
        return [
            model.model_validate(document)
            for document in self.store.find(business_type.collection, isActive=True)
        ]

    def update(
        self,
        business_type: BusinessType,
        business_id: str,
        data: BusinessUpdate,
    ) -> BusinessRecord:
        """
        Apply a partial update.

        Restaurant settings go through the settings validator and are merged
        into the stored settings; nothing is written if validation fails.

        Raises:
            BusinessNotFoundError: If the business does not exist
            BookingValidationError: If restaurant settings are invalid
        """
        current = self.get(business_type, business_id)
        changes = data.to_document(partial=True)

        if isinstance(data, RestaurantUpdate) and data.settings is not None:
            settings_changes = validate_settings_update(data.settings, current.settings)
            changes["settings"] = {**current.settings.to_document(), **settings_changes}

        document = self.store.update_by_id(business_type.collection, business_id, changes)
        if document is None:
            raise BusinessNotFoundError(f"{business_type.value.capitalize()} not found.", field="id")

        logger.info(f"Updated {business_type.value} {business_id}: {sorted(changes)}")
        return RECORD_MODELS[business_type].model_validate(document)

    def update_restaurant(self, restaurant_id: str, data: RestaurantUpdate) -> RestaurantRecord:
        """Update a restaurant, validating its settings first."""
        return self.update(BusinessType.RESTAURANT, restaurant_id, data)

    def deactivate(self, business_type: BusinessType, business_id: str) -> bool:
        """Soft-delete: the business is hidden from listings but kept."""
        document = self.store.update_by_id(business_type.collection, business_id, {"isActive": False})
        if document is None:
            raise BusinessNotFoundError(f"{business_type.value.capitalize()} not found.", field="id")
        logger.info(f"Deactivated {business_type.value} {business_id}")
        return True
