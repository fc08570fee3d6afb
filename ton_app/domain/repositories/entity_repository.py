from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Optional, TypeVar

from ..models.page import Page

T = TypeVar("T")


class EntityRepository(ABC, Generic[T]):
    """
    Repository interface - generic contract for entities stored in the
    single table.

    Partial updates are mappings: a key that is present is applied (an
    explicit None clears a nullable attribute), a key that is absent is
    left untouched.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> T:
        """Get entity by ID. Raises NotFoundError if absent"""
        pass

    @abstractmethod
    async def create(self, fields: Mapping[str, Any]) -> T:
        """Create entity with a freshly generated ID"""
        pass

    @abstractmethod
    async def update(self, entity_id: str, changes: Mapping[str, Any]) -> T:
        """Apply the provided fields. Raises NotFoundError if absent"""
        pass

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        """Delete entity. Deleting an absent ID is a no-op"""
        pass

    @abstractmethod
    async def scan(self, limit: int, cursor: Optional[str] = None) -> Page[T]:
        """Return one page of entities, resuming from cursor if given"""
        pass
