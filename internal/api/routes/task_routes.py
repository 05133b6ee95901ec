"""
Task API Routes.
"""

from fastapi import APIRouter

from core.config import get_settings
from internal.api.routes.resource_routes import COMMON_RESPONSES, add_crud_routes
from internal.api.schemas import StandardResponse
from internal.api.utils import envelope_response
from services.task_service import TaskService


def create_task_routes(task_service: TaskService) -> APIRouter:
    """
    Factory function to create task routes with dependency injection.

    Args:
        task_service: Service handling tasks

    Returns:
        APIRouter: Configured router with all task endpoints
    """
    router = APIRouter(prefix=f"{get_settings().api_prefix}/tasks", tags=["Tasks"])
    add_crud_routes(router, task_service, "task")

    @router.get(
        "/user/{userId}",
        response_model=StandardResponse,
        summary="Tasks By User",
        description="Tasks created by the user",
        responses=COMMON_RESPONSES,
    )
    async def get_tasks_by_user(userId: str):
        return envelope_response(await task_service.get_tasks_by_user(userId))

    @router.get(
        "/status/{status}",
        response_model=StandardResponse,
        summary="Tasks By Status",
        description="Tasks in a status: pending, in-progress or completed",
        responses=COMMON_RESPONSES,
    )
    async def get_tasks_by_status(status: str):
        return envelope_response(await task_service.get_tasks_by_status(status))

    @router.get(
        "/assignee/{assignee}",
        response_model=StandardResponse,
        summary="Tasks By Assignee",
        responses=COMMON_RESPONSES,
    )
    async def get_tasks_by_assignee(assignee: str):
        return envelope_response(await task_service.get_tasks_by_assignee(assignee))

    @router.get(
        "/project/{projectId}",
        response_model=StandardResponse,
        summary="Tasks By Project",
        responses=COMMON_RESPONSES,
    )
    async def get_tasks_by_project(projectId: str):
        return envelope_response(await task_service.get_tasks_by_project(projectId))

    return router
