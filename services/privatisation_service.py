"""Privatisation options offered by restaurants."""
import logging
from typing import List

from db.store import DocumentStore
from domain.enums import BusinessType, Collection
from domain.errors import PrivatisationOptionNotFoundError
from domain.models import (
    PrivatisationOptionCreate,
    PrivatisationOptionRecord,
    PrivatisationOptionUpdate,
)
from .business_service import BusinessService


logger = logging.getLogger(__name__)

OPTIONS = Collection.PRIVATISATION_OPTIONS.value


class PrivatisationService:
    """Owner-managed CRUD for privatisation options."""

    def __init__(self, store: DocumentStore):
        self.store = store
        self.businesses = BusinessService(store)

    def create_option(self, data: PrivatisationOptionCreate) -> PrivatisationOptionRecord:
        """
        Create an option for an existing restaurant.

        Raises:
            BusinessNotFoundError: If the restaurant does not exist
        """
        self.businesses.get(BusinessType.RESTAURANT, data.restaurant_id)
        document = self.store.create(OPTIONS, data.to_document())
        logger.info(f"Created privatisation option '{data.name}' for restaurant {data.restaurant_id}")
        return PrivatisationOptionRecord.model_validate(document)

    def get_option(self, option_id: str) -> PrivatisationOptionRecord:
        document = self.store.find_by_id(OPTIONS, option_id)
        if document is None:
            raise PrivatisationOptionNotFoundError(f"Privatisation option {option_id} not found", field="id")
        return PrivatisationOptionRecord.model_validate(document)

    def list_for_restaurant(self, restaurant_id: str) -> List[PrivatisationOptionRecord]:
        return [
            PrivatisationOptionRecord.model_validate(document)
            for document in self.store.find(OPTIONS, restaurantId=restaurant_id)
        ]

    def update_option(self, option_id: str, data: PrivatisationOptionUpdate) -> PrivatisationOptionRecord:
        document = self.store.update_by_id(OPTIONS, option_id, data.to_document(partial=True))
        if document is None:
            raise PrivatisationOptionNotFoundError(f"Privatisation option {option_id} not found", field="id")
        return PrivatisationOptionRecord.model_validate(document)

    def delete_option(self, option_id: str) -> bool:
        return self.store.delete_by_id(OPTIONS, option_id)
