"""
Activity service.
Activities are the audit trail of actions taken on tasks.
"""

from typing import Optional

from repositories.activity_repository import ActivityRepository
from repositories.models import ActivityModel
from repositories.schema import ResourceSchema
from services.envelope import Envelope
from services.resource_service import ResourceService


class ActivityService(ResourceService):
    """Service for task activities. The acting user is recorded as `userId`."""

    def __init__(self, repository: Optional[ActivityRepository] = None):
        super().__init__(
            repository or ActivityRepository(),
            ResourceSchema(ActivityModel),
            entity_name="activity",
            owner_field="userId",
            plural_name="activities",
        )

    async def get_activities_by_task(self, task_id: Optional[str]) -> Envelope:
        return await self.query_by_field("taskId", task_id)

    async def get_activities_by_user(self, user_id: Optional[str]) -> Envelope:
        return await self.query_by_field("userId", user_id)

    async def get_activities_by_action(self, action: Optional[str]) -> Envelope:
        return await self.query_by_field("action", action)

    async def get_activities_by_details(self, details: Optional[str]) -> Envelope:
        return await self.query_by_field("details", details)
