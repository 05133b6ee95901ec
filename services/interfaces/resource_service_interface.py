"""
Interface for Resource Service.
Defines the contract every entity service implements.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from services.envelope import Envelope


class IResourceService(ABC):
    """Interface for validated CRUD operations on one entity type."""

    @abstractmethod
    async def create(self, data: Optional[Dict[str, Any]], owner_id: Optional[str]) -> Envelope:
        """
        Validate and store a new entity owned by `owner_id`.

        Returns:
            Envelope: data is the new entity id
        """
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: Optional[str]) -> Envelope:
        """
        Fetch one entity.

        Returns:
            Envelope: data is the stored entity, 404 if absent
        """
        pass

    @abstractmethod
    async def update(self, entity_id: Optional[str], data: Optional[Dict[str, Any]]) -> Envelope:
        """
        Apply a partial update.

        Returns:
            Envelope: data is the full updated entity
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: Optional[str]) -> Envelope:
        """
        Delete one entity.

        Returns:
            Envelope: data is the entity as it was before deletion
        """
        pass

    @abstractmethod
    async def list_all(self) -> Envelope:
        """
        List every entity.

        Returns:
            Envelope: data is a list, empty when there are none
        """
        pass

    @abstractmethod
    async def query_by_field(self, field: str, value: Any) -> Envelope:
        """
        List entities whose `field` equals `value`.

        Returns:
            Envelope: data is the matching entities
        """
        pass
