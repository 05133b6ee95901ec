"""
Project service, including team membership management.
"""

from typing import Any, Optional

from core.errors import (
    AlreadyMemberError,
    MissingParameterError,
    NotAMemberError,
    NotFoundError,
)
from core.logger import logger
from repositories.models import ProjectModel, next_timestamp
from repositories.project_repository import ProjectRepository
from repositories.schema import ResourceSchema, validate_string_type
from services.envelope import Envelope
from services.resource_service import ResourceService


class ProjectService(ResourceService):
    """Service for projects. The creating user is recorded as `createdBy`."""

    def __init__(self, repository: Optional[ProjectRepository] = None):
        super().__init__(
            repository or ProjectRepository(),
            ResourceSchema(ProjectModel),
            entity_name="project",
            owner_field="createdBy",
        )

    async def get_projects_by_user(self, user_id: Optional[str]) -> Envelope:
        return await self.query_by_field("createdBy", user_id)

    async def get_projects_by_member(self, user_id: Optional[str]) -> Envelope:
        """Projects whose team includes `user_id`."""
        return await self.query_by_field("teamMembers", user_id)

    @staticmethod
    def _check_member_ids(project_id: Any, user_id: Any) -> None:
        if not project_id or not user_id:
            raise MissingParameterError("Project ID and User ID are required")
        validate_string_type(
            values=[project_id, user_id],
            error_message="Project ID and User ID must be strings",
        )

    async def add_team_member(self, project_id: Optional[str], user_id: Optional[str]) -> Envelope:
        """
        Add a user to a project's team.

        The membership check is repeated inside the write itself, so two
        concurrent adds of the same user cannot both succeed.

        Returns:
            Envelope: data is the project id
        """
        prefix = "Error adding team member"
        try:
            self._check_member_ids(project_id, user_id)

            project = await self.repository.find_by_id(project_id)
            if project is None:
                raise NotFoundError("Project not found")
            if user_id in project.get("teamMembers", []):
                raise AlreadyMemberError("User is already a team member")

            added = await self.repository.add_team_member(
                project_id, user_id, next_timestamp(project.get("updatedAt"))
            )
            if not added:
                # Lost a race with a concurrent add, or the project was deleted
                if await self.repository.find_by_id(project_id) is None:
                    raise NotFoundError("Project not found")
                raise AlreadyMemberError("User is already a team member")

            return Envelope.ok("Team member added successfully", data=project_id)

        except Exception as e:
            return self._failure(prefix, e)

    async def remove_team_member(
        self, project_id: Optional[str], user_id: Optional[str]
    ) -> Envelope:
        """
        Remove a user from a project's team.

        Returns:
            Envelope: data is the project id
        """
        prefix = "Error removing team member"
        try:
            self._check_member_ids(project_id, user_id)

            project = await self.repository.find_by_id(project_id)
            if project is None:
                raise NotFoundError("Project not found")
            if user_id not in project.get("teamMembers", []):
                raise NotAMemberError("User is not a team member")

            removed = await self.repository.remove_team_member(
                project_id, user_id, next_timestamp(project.get("updatedAt"))
            )
            if not removed:
                if await self.repository.find_by_id(project_id) is None:
                    raise NotFoundError("Project not found")
                raise NotAMemberError("User is not a team member")

            logger.debug(f"Team of project {project_id} no longer includes {user_id}")
            return Envelope.ok("Team member removed successfully", data=project_id)

        except Exception as e:
            return self._failure(prefix, e)
