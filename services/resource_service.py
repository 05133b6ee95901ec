"""
Generic validated CRUD service.
One implementation shared by every entity; the entity services only configure it.
"""

import uuid
from typing import Any, Dict, Optional

from core.errors import MissingParameterError, NotFoundError, ValidationFailure
from core.logger import logger
from repositories.interfaces import IResourceRepository
from repositories.models import next_timestamp, utcnow
from repositories.schema import ResourceSchema, validate_string_type
from services.envelope import Envelope, failure_envelope
from services.interfaces import IResourceService


class ResourceService(IResourceService):
    """
    Validated CRUD over one collection.

    Args:
        repository: Data access for the entity's collection
        schema: Create/update validation for the entity model
        entity_name: Lower-case singular name used in messages ("task")
        owner_field: Field forced to the creating user's id
        creation_defaults: Values applied on create when the caller omits them
        plural_name: Plural used in list messages, defaults to entity_name + "s"
    """

    def __init__(
        self,
        repository: IResourceRepository,
        schema: ResourceSchema,
        entity_name: str,
        owner_field: str,
        creation_defaults: Optional[Dict[str, Any]] = None,
        plural_name: Optional[str] = None,
    ):
        self.repository = repository
        self.schema = schema
        self.entity_name = entity_name
        self.owner_field = owner_field
        self.creation_defaults = dict(creation_defaults or {})
        self.plural_name = plural_name or f"{entity_name}s"
        logger.debug(f"{type(self).__name__} initialized")

    @property
    def label(self) -> str:
        return self.entity_name.capitalize()

    def _failure(self, prefix: str, exc: Exception) -> Envelope:
        return failure_envelope(prefix, exc)

    def _require_id(self, entity_id: Optional[str]) -> str:
        if not entity_id:
            raise MissingParameterError(f"{self.label} ID is required")
        validate_string_type(entity_id, error_message=f"{self.label} ID must be a string")
        return entity_id

    @staticmethod
    def _require_object(data: Any) -> Dict[str, Any]:
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValidationFailure(["body: must be a JSON object"])
        return data

    async def create(self, data: Optional[Dict[str, Any]], owner_id: Optional[str]) -> Envelope:
        prefix = f"Error creating {self.entity_name}"
        try:
            # Checked before validation so nothing is written without an owner
            if not owner_id:
                raise MissingParameterError("User ID is required")
            validate_string_type(owner_id, error_message="User ID must be a string")
            payload = self._require_object(data)

            now = utcnow()
            document = dict(self.creation_defaults)
            document.update({key: value for key, value in payload.items() if value is not None})
            document.update(id=str(uuid.uuid4()), createdAt=now, updatedAt=now)
            document[self.owner_field] = owner_id

            validated = self.schema.validate_create(document)
            entity_id = await self.repository.create(validated)

            logger.info(f"{self.label} created: id={entity_id}, owner={owner_id}")
            return Envelope.ok(f"{self.label} created successfully", data=entity_id)

        except Exception as e:
            return self._failure(prefix, e)

    async def get_by_id(self, entity_id: Optional[str]) -> Envelope:
        prefix = f"Error fetching {self.entity_name}"
        try:
            entity_id = self._require_id(entity_id)
            entity = await self.repository.find_by_id(entity_id)
            if entity is None:
                raise NotFoundError(f"{self.label} not found")
            return Envelope.ok(f"{self.label} retrieved successfully", data=entity)

        except Exception as e:
            return self._failure(prefix, e)

    async def update(self, entity_id: Optional[str], data: Optional[Dict[str, Any]]) -> Envelope:
        prefix = f"Error updating {self.entity_name}"
        try:
            entity_id = self._require_id(entity_id)
            changes = self.schema.validate_update(self._require_object(data), utcnow())

            existing = await self.repository.find_by_id(entity_id)
            if existing is None:
                raise NotFoundError(f"{self.label} not found")
            changes["updatedAt"] = next_timestamp(existing.get("updatedAt"))

            if not await self.repository.update_by_id(entity_id, changes):
                raise NotFoundError(f"{self.label} not found")

            updated = await self.repository.find_by_id(entity_id)
            if updated is None:
                raise NotFoundError(f"{self.label} not found")

            logger.info(f"{self.label} updated: id={entity_id}, fields={sorted(changes)}")
            return Envelope.ok(f"{self.label} updated successfully", data=updated)

        except Exception as e:
            return self._failure(prefix, e)

    async def delete(self, entity_id: Optional[str]) -> Envelope:
        prefix = f"Error deleting {self.entity_name}"
        try:
            entity_id = self._require_id(entity_id)
            existing = await self.repository.find_by_id(entity_id)
            if existing is None or not await self.repository.delete_by_id(entity_id):
                raise NotFoundError(f"{self.label} not found")

            logger.info(f"{self.label} deleted: id={entity_id}")
            return Envelope.ok(f"{self.label} deleted successfully", data=existing)

        except Exception as e:
            return self._failure(prefix, e)

    async def list_all(self) -> Envelope:
        prefix = f"Error fetching {self.plural_name}"
        try:
            entities = await self.repository.find_many()
            return Envelope.ok(
                f"{self.plural_name.capitalize()} retrieved successfully", data=entities
            )

        except Exception as e:
            return self._failure(prefix, e)

    async def query_by_field(self, field: str, value: Any) -> Envelope:
        """
        Equality lookup on one field.

        For list fields the store matches documents whose list contains `value`.
        """
        prefix = f"Error fetching {self.plural_name} by {field}"
        try:
            if value is None or value == "":
                raise MissingParameterError(f"{field} is required")
            validate_string_type(value, error_message=f"{field} must be a string")
            if field not in self.schema.fields:
                raise ValidationFailure([f"{field}: is not a {self.entity_name} field"])

            entities = await self.repository.find_many({field: value})
            return Envelope.ok(
                f"{self.plural_name.capitalize()} retrieved successfully", data=entities
            )

        except Exception as e:
            return self._failure(prefix, e)
