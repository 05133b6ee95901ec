"""
Project repository for MongoDB operations.
"""

from datetime import datetime
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from core.logger import logger
from repositories.base_repository import BaseRepository
from repositories.models import PROJECTS_COLLECTION


class ProjectRepository(BaseRepository):
    """Repository for project documents."""

    def __init__(self, database: Optional[AsyncIOMotorDatabase] = None):
        super().__init__(PROJECTS_COLLECTION, database)
        logger.debug(f"ProjectRepository initialized for collection: {self.collection_name}")

    async def add_team_member(
        self, project_id: str, user_id: str, updated_at: datetime
    ) -> bool:
        """
        Add `user_id` to the project's team in a single atomic write.

        Returns:
            True if added, False if the project is gone or already lists the user
        """
        added = await self.add_to_array(
            project_id, "teamMembers", user_id, {"updatedAt": updated_at}
        )
        if added:
            logger.info(f"Added team member: project={project_id}, user={user_id}")
        return added

    async def remove_team_member(
        self, project_id: str, user_id: str, updated_at: datetime
    ) -> bool:
        """
        Remove `user_id` from the project's team in a single atomic write.

        Returns:
            True if removed, False if the project is gone or does not list the user
        """
        removed = await self.remove_from_array(
            project_id, "teamMembers", user_id, {"updatedAt": updated_at}
        )
        if removed:
            logger.info(f"Removed team member: project={project_id}, user={user_id}")
        return removed
