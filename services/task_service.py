"""
Task service.
"""

from typing import Optional

from core.logger import logger
from repositories.models import TaskModel, TaskStatus
from repositories.schema import ResourceSchema
from repositories.task_repository import TaskRepository
from services.envelope import Envelope
from services.resource_service import ResourceService


class TaskService(ResourceService):
    """Service for tasks. The creating user is recorded as `assignedBy`."""

    def __init__(self, repository: Optional[TaskRepository] = None):
        super().__init__(
            repository or TaskRepository(),
            ResourceSchema(TaskModel),
            entity_name="task",
            owner_field="assignedBy",
            creation_defaults={"status": TaskStatus.PENDING.value},
        )

    async def get_tasks_by_user(self, user_id: Optional[str]) -> Envelope:
        """Tasks created by `user_id`."""
        logger.debug(f"Fetching tasks by user: {user_id}")
        return await self.query_by_field("assignedBy", user_id)

    async def get_tasks_by_status(self, status: Optional[str]) -> Envelope:
        return await self.query_by_field("status", status)

    async def get_tasks_by_assignee(self, assignee: Optional[str]) -> Envelope:
        return await self.query_by_field("assignedTo", assignee)

    async def get_tasks_by_project(self, project_id: Optional[str]) -> Envelope:
        return await self.query_by_field("projectId", project_id)
