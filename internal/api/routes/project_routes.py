"""
Project API Routes.
"""

from typing import Any

from fastapi import APIRouter, Body

from core.config import get_settings
from core.logger import logger
from internal.api.routes.resource_routes import COMMON_RESPONSES, add_crud_routes
from internal.api.schemas import StandardResponse
from internal.api.utils import envelope_response
from services.project_service import ProjectService


def _user_id(body: Any) -> Any:
    return body.get("userId") if isinstance(body, dict) else None


def create_project_routes(project_service: ProjectService) -> APIRouter:
    """
    Factory function to create project routes with dependency injection.

    Args:
        project_service: Service handling projects and their teams

    Returns:
        APIRouter: Configured router with all project endpoints
    """
    router = APIRouter(prefix=f"{get_settings().api_prefix}/projects", tags=["Projects"])
    add_crud_routes(router, project_service, "project")

    @router.get(
        "/user/{userId}",
        response_model=StandardResponse,
        summary="Projects By Creator",
        responses=COMMON_RESPONSES,
    )
    async def get_projects_by_user(userId: str):
        return envelope_response(await project_service.get_projects_by_user(userId))

    @router.get(
        "/member/{userId}",
        response_model=StandardResponse,
        summary="Projects By Team Member",
        responses=COMMON_RESPONSES,
    )
    async def get_projects_by_member(userId: str):
        return envelope_response(await project_service.get_projects_by_member(userId))

    @router.post(
        "/{projectId}/team/add",
        response_model=StandardResponse,
        summary="Add Team Member",
        description="Body: `{\"userId\": \"...\"}`",
        responses=COMMON_RESPONSES,
    )
    async def add_team_member(projectId: str, body: Any = Body(default=None)):
        """
        Add a user to the project team.

        Adding a user who is already a member is a 400.
        """
        envelope = await project_service.add_team_member(projectId, _user_id(body))
        logger.debug(f"Team add on {projectId}: status={envelope.status}")
        return envelope_response(envelope)

    @router.post(
        "/{projectId}/team/remove",
        response_model=StandardResponse,
        summary="Remove Team Member",
        description="Body: `{\"userId\": \"...\"}`",
        responses=COMMON_RESPONSES,
    )
    async def remove_team_member(projectId: str, body: Any = Body(default=None)):
        envelope = await project_service.remove_team_member(projectId, _user_id(body))
        logger.debug(f"Team remove on {projectId}: status={envelope.status}")
        return envelope_response(envelope)

    return router
