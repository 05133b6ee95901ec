"""
Interface for Resource Repository.
Defines the contract that every entity repository must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class IResourceRepository(ABC):
    """Interface for single-collection document operations."""

    @abstractmethod
    async def create(self, document: Dict[str, Any]) -> str:
        """
        Insert a new document.

        Args:
            document: Validated document containing its `id`

        Returns:
            str: ID of created document
        """
        pass

    @abstractmethod
    async def find_by_id(self, document_id: str) -> Optional[Dict[str, Any]]:
        """
        Find a document by ID.

        Args:
            document_id: ID of the document

        Returns:
            Optional[Dict]: Document if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_many(
        self, filter_dict: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        Find documents matching an equality filter.

        Args:
            filter_dict: Field/value pairs, None for all documents

        Returns:
            List[Dict]: Matching documents
        """
        pass

    @abstractmethod
    async def update_by_id(self, document_id: str, update_data: Dict[str, Any]) -> bool:
        """
        Set fields on a document.

        Args:
            document_id: ID of the document
            update_data: Fields to set

        Returns:
            bool: True if the document exists, False otherwise
        """
        pass

    @abstractmethod
    async def delete_by_id(self, document_id: str) -> bool:
        """
        Delete a document.

        Args:
            document_id: ID of the document

        Returns:
            bool: True if deletion successful, False otherwise
        """
        pass


class IProfileRepository(ABC):
    """Interface for user profile storage, keyed by identity uid."""

    @abstractmethod
    async def ensure_profile(self, uid: str, profile: Dict[str, Any]) -> bool:
        """
        Store `profile` under `uid` unless a profile already exists.

        Returns:
            bool: True if a profile was created, False if it already existed
        """
        pass

    @abstractmethod
    async def find_by_uid(self, uid: str) -> Optional[Dict[str, Any]]:
        """Find a profile by uid."""
        pass
