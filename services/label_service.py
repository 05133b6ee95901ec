"""
Label service.
"""

from typing import Optional

from repositories.label_repository import LabelRepository
from repositories.models import LabelModel
from repositories.schema import ResourceSchema
from services.envelope import Envelope
from services.resource_service import ResourceService


class LabelService(ResourceService):
    def __init__(self, repository: Optional[LabelRepository] = None):
        super().__init__(
            repository or LabelRepository(),
            ResourceSchema(LabelModel),
            entity_name="label",
            owner_field="createdBy",
        )

    async def get_labels_by_user(self, user_id: Optional[str]) -> Envelope:
        return await self.query_by_field("createdBy", user_id)

    async def get_labels_by_name(self, name: Optional[str]) -> Envelope:
        return await self.query_by_field("name", name)

    async def get_labels_by_color(self, color: Optional[str]) -> Envelope:
        return await self.query_by_field("color", color)
