# Standard library imports
import logging
import uuid
from abc import abstractmethod
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

# External package imports
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.exceptions import NotFoundError, TonAppError, ValidationError
from ...domain.models.page import Page
from .single_table import SingleTableStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MongoEntityRepository(Generic[T]):
    """
    Shared CRUD and pagination logic for entities kept in the single table.

    Subclasses supply the conversions between attribute dictionaries and
    domain models. Store errors are logged and re-raised unchanged.
    """

    def __init__(self, store: SingleTableStore) -> None:
        self.store = store
        self.schema = store.schema

    @abstractmethod
    def _to_entity(self, attributes: Mapping[str, Any]) -> T:
        """Convert a stored attribute dictionary to the domain model"""

    @abstractmethod
    def _to_attributes(self, entity: T) -> Dict[str, Any]:
        """Convert a domain model to an attribute dictionary"""

    def _generate_id(self) -> str:
        return str(uuid.uuid4())

    def _key(self, entity_id: str) -> Dict[str, Any]:
        return {self.schema.identity: entity_id}

    def _not_found(self, entity_id: str) -> NotFoundError:
        return NotFoundError(
            f"{self.schema.entity.capitalize()} with ID {entity_id} not found",
            details={"id": entity_id},
        )

    def _build_entity(self, attributes: Mapping[str, Any]) -> T:
        try:
            return self._to_entity(attributes)
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e)) from e

    def _load_entity(self, attributes: Mapping[str, Any]) -> T:
        """Convert a stored record; a malformed record is an unexpected error"""
        try:
            return self._to_entity(attributes)
        except (TypeError, ValueError) as e:
            logger.error(f"Malformed {self.schema.entity} record in the table: {e}", exc_info=True)
            raise TonAppError(f"Malformed {self.schema.entity} record", details={"reason": str(e)}) from e

    async def get_by_id(self, entity_id: str) -> T:
        """
        Get entity by ID

        Args:
            entity_id: Identity of the entity

        Returns:
            Domain model

        Raises:
            NotFoundError: If no entity has this ID
        """
        if not entity_id:
            raise self._not_found(entity_id)

        try:
            attributes = await self.store.get(self._key(entity_id))
        except PyMongoError as e:
            logger.error(f"Error finding {self.schema.entity} by ID: {e}", exc_info=True)
            raise

        if attributes is None:
            raise self._not_found(entity_id)
        return self._load_entity(attributes)

    async def create(self, fields: Mapping[str, Any]) -> T:
        """
        Create a new entity with a generated ID

        Args:
            fields: Entity attributes without the identity attribute

        Returns:
            Created domain model including its generated ID

        Raises:
            ValidationError: If an ID is supplied or the fields are invalid
        """
        if self.schema.identity in fields:
            raise ValidationError(f"{self.schema.identity} is generated and cannot be supplied")

        attributes = {name: fields.get(name) for name in self.schema.attributes}
        attributes[self.schema.identity] = self._generate_id()
        entity = self._build_entity(attributes)

        try:
            stored = await self.store.put(self._to_attributes(entity))
        except PyMongoError as e:
            logger.error(f"Error creating {self.schema.entity}: {e}", exc_info=True)
            raise

        logger.info(f"Created {self.schema.entity} {attributes[self.schema.identity]}")
        return self._load_entity(stored)

    async def update(self, entity_id: str, changes: Mapping[str, Any]) -> T:
        """
        Update only the provided fields of an entity

        Args:
            entity_id: Identity of the entity
            changes: Mapping of attribute name to new value; absent keys are untouched

        Returns:
            Updated domain model (unchanged if changes is empty)

        Raises:
            NotFoundError: If no entity has this ID
            ValidationError: If a change targets a key/unknown attribute or is invalid
        """
        existing = await self.get_by_id(entity_id)
        if not changes:
            return existing

        merged = {**self._to_attributes(existing), **changes}
        self._build_entity(merged)

        try:
            attributes = await self.store.update(self._key(entity_id), changes)
        except PyMongoError as e:
            logger.error(f"Error updating {self.schema.entity}: {e}", exc_info=True)
            raise

        if attributes is None:
            # Removed between the existence check and the write
            raise self._not_found(entity_id)
        return self._load_entity(attributes)

    async def delete(self, entity_id: str) -> None:
        """
        Delete an entity; deleting an absent ID is a no-op

        Args:
            entity_id: Identity of the entity
        """
        if not entity_id:
            return

        try:
            deleted = await self.store.delete(self._key(entity_id))
        except PyMongoError as e:
            logger.error(f"Error deleting {self.schema.entity}: {e}", exc_info=True)
            raise

        if deleted:
            logger.info(f"Deleted {self.schema.entity} {entity_id}")
        else:
            logger.debug(f"Delete of absent {self.schema.entity} {entity_id} ignored")

    async def scan(self, limit: int, cursor: Optional[str] = None) -> Page[T]:
        """
        List entities one page at a time

        Args:
            limit: Maximum number of entities in the page
            cursor: Opaque cursor from the previous page

        Returns:
            Page with items and the cursor of the next page (None on the last page)
        """
        try:
            items, next_cursor = await self.store.scan(limit, cursor)
        except PyMongoError as e:
            logger.error(f"Error scanning {self.schema.entity} items: {e}", exc_info=True)
            raise

        return Page(
            items=[self._load_entity(attributes) for attributes in items],
            next_cursor=next_cursor,
        )
