"""
Activity API Routes.
"""

from fastapi import APIRouter

from core.config import get_settings
from internal.api.routes.resource_routes import COMMON_RESPONSES, add_crud_routes
from internal.api.schemas import StandardResponse
from internal.api.utils import envelope_response
from services.activity_service import ActivityService


def create_activity_routes(activity_service: ActivityService) -> APIRouter:
    """
    Factory function to create activity routes with dependency injection.

    Args:
        activity_service: Service handling task activities

    Returns:
        APIRouter: Configured router with all activity endpoints
    """
    router = APIRouter(prefix=f"{get_settings().api_prefix}/activities", tags=["Activities"])
    add_crud_routes(router, activity_service, "activity")

    @router.get("/task/{taskId}", response_model=StandardResponse, responses=COMMON_RESPONSES)
    async def get_activities_by_task(taskId: str):
        return envelope_response(await activity_service.get_activities_by_task(taskId))

    @router.get("/user/{userId}", response_model=StandardResponse, responses=COMMON_RESPONSES)
    async def get_activities_by_user(userId: str):
        return envelope_response(await activity_service.get_activities_by_user(userId))

    @router.get("/action/{action}", response_model=StandardResponse, responses=COMMON_RESPONSES)
    async def get_activities_by_action(action: str):
        return envelope_response(await activity_service.get_activities_by_action(action))

    @router.get(
        "/details/{details}", response_model=StandardResponse, responses=COMMON_RESPONSES
    )
    async def get_activities_by_details(details: str):
        return envelope_response(await activity_service.get_activities_by_details(details))

    return router
