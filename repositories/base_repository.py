"""
Base repository with common CRUD operations.
Follows Single Responsibility Principle - only handles data access.
"""

import asyncio
from typing import Any, Awaitable, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from core.config import get_settings
from core.database import get_database
from core.errors import BackendFailure
from core.logger import logger
from repositories.interfaces import IResourceRepository


def _to_entity(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Strip the Mongo _id; entities carry their own `id` field."""
    if document is None:
        return None
    document_id = document.pop("_id", None)
    if "id" not in document and document_id is not None:
        document["id"] = str(document_id)
    return document


class BaseRepository(IResourceRepository):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.

    Documents are keyed by their string `id`, stored as the Mongo `_id`.
    Every collection call is bounded by MONGODB_OPERATION_TIMEOUT.
    """

    def __init__(
        self, collection_name: str, database: Optional[AsyncIOMotorDatabase] = None
    ):
        """
        Initialize repository with collection name.

        Args:
            collection_name: Name of MongoDB collection
            database: Database to use instead of the global connection
        """
        self.collection_name = collection_name
        self._database = database

    async def get_collection(self) -> AsyncIOMotorCollection:
        """Get MongoDB collection."""
        if self._database is not None:
            return self._database[self.collection_name]
        mongodb = await get_database()
        return mongodb.get_collection(self.collection_name)

    async def _with_deadline(self, operation: Awaitable, action: str) -> Any:
        timeout = get_settings().mongodb_operation_timeout
        try:
            return await asyncio.wait_for(operation, timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"{action} in {self.collection_name} timed out after {timeout}s")
            raise BackendFailure(
                f"{action} in {self.collection_name} timed out after {timeout}s", cause=e
            ) from e

    async def create(self, document: Dict[str, Any]) -> str:
        """
        Insert a new document keyed by its `id`.

        Args:
            document: Validated document, must contain `id`

        Returns:
            ID of created document
        """
        try:
            collection = await self.get_collection()
            data = dict(document)
            data["_id"] = data["id"]
            await self._with_deadline(collection.insert_one(data), "insert")
            logger.debug(f"Created document in {self.collection_name}: {document['id']}")
            return document["id"]
        except Exception as e:
            logger.error(f"Error creating document in {self.collection_name}: {e}")
            raise

    async def find_by_id(self, document_id: str) -> Optional[Dict[str, Any]]:
        """
        Find document by ID.

        Args:
            document_id: Document ID

        Returns:
            Document if found, None otherwise
        """
        try:
            collection = await self.get_collection()
            document = await self._with_deadline(
                collection.find_one({"_id": document_id}), "find_one"
            )
            return _to_entity(document)
        except Exception as e:
            logger.error(f"Error finding document by ID in {self.collection_name}: {e}")
            raise

    async def find_many(
        self, filter_dict: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """
        Find every document matching an equality filter.

        Args:
            filter_dict: Query filter, None matches the whole collection

        Returns:
            List of documents
        """
        try:
            collection = await self.get_collection()
            cursor = collection.find(filter_dict or {})
            documents = await self._with_deadline(cursor.to_list(length=None), "find")
            return [_to_entity(document) for document in documents]
        except Exception as e:
            logger.error(f"Error finding documents in {self.collection_name}: {e}")
            raise

    async def update_by_id(self, document_id: str, update_data: Dict[str, Any]) -> bool:
        """
        Set the given fields on one document, leaving the others untouched.

        Args:
            document_id: Document ID
            update_data: Fields to set

        Returns:
            True if a document matched, False otherwise
        """
        try:
            collection = await self.get_collection()
            result = await self._with_deadline(
                collection.update_one({"_id": document_id}, {"$set": update_data}),
                "update",
            )
            logger.debug(f"Updated document in {self.collection_name}: {document_id}")
            return result.matched_count > 0
        except Exception as e:
            logger.error(f"Error updating document in {self.collection_name}: {e}")
            raise

    async def delete_by_id(self, document_id: str) -> bool:
        """
        Delete document by ID.

        Args:
            document_id: Document ID

        Returns:
            True if deleted, False otherwise
        """
        try:
            collection = await self.get_collection()
            result = await self._with_deadline(
                collection.delete_one({"_id": document_id}), "delete"
            )
            logger.debug(f"Deleted document in {self.collection_name}: {document_id}")
            return result.deleted_count > 0
        except Exception as e:
            logger.error(f"Error deleting document in {self.collection_name}: {e}")
            raise

    async def add_to_array(
        self,
        document_id: str,
        field: str,
        value: Any,
        extra_set: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Atomically append `value` to an array field unless already present.

        Returns:
            True if the value was added, False if the document is missing or
            already contains it
        """
        update: Dict[str, Any] = {"$addToSet": {field: value}}
        if extra_set:
            update["$set"] = extra_set
        try:
            collection = await self.get_collection()
            result = await self._with_deadline(
                collection.update_one({"_id": document_id, field: {"$ne": value}}, update),
                "add_to_array",
            )
            return result.matched_count > 0
        except Exception as e:
            logger.error(f"Error adding to {field} in {self.collection_name}: {e}")
            raise

    async def remove_from_array(
        self,
        document_id: str,
        field: str,
        value: Any,
        extra_set: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Atomically remove `value` from an array field if present.

        Returns:
            True if the value was removed, False if the document is missing or
            does not contain it
        """
        update: Dict[str, Any] = {"$pull": {field: value}}
        if extra_set:
            update["$set"] = extra_set
        try:
            collection = await self.get_collection()
            result = await self._with_deadline(
                collection.update_one({"_id": document_id, field: value}, update),
                "remove_from_array",
            )
            return result.matched_count > 0
        except Exception as e:
            logger.error(f"Error removing from {field} in {self.collection_name}: {e}")
            raise

    async def insert_if_absent(self, document_id: str, document: Dict[str, Any]) -> bool:
        """
        Insert a document under `document_id` unless one already exists.

        Idempotent: repeating the call never changes an existing document.

        Returns:
            True if the document was created, False if it already existed
        """
        try:
            collection = await self.get_collection()
            result = await self._with_deadline(
                collection.update_one(
                    {"_id": document_id}, {"$setOnInsert": document}, upsert=True
                ),
                "insert_if_absent",
            )
            created = result.upserted_id is not None
            logger.debug(
                f"insert_if_absent in {self.collection_name}: {document_id} created={created}"
            )
            return created
        except Exception as e:
            logger.error(f"Error upserting document in {self.collection_name}: {e}")
            raise
