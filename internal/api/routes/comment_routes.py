"""
Comment API Routes.
"""

from fastapi import APIRouter

from core.config import get_settings
from internal.api.routes.resource_routes import COMMON_RESPONSES, add_crud_routes
from internal.api.schemas import StandardResponse
from internal.api.utils import envelope_response
from services.comment_service import CommentService


def create_comment_routes(comment_service: CommentService) -> APIRouter:
    """
    Factory function to create comment routes with dependency injection.

    Args:
        comment_service: Service handling comments

    Returns:
        APIRouter: Configured router with all comment endpoints
    """
    router = APIRouter(prefix=f"{get_settings().api_prefix}/comment", tags=["Comments"])
    add_crud_routes(router, comment_service, "comment")

    @router.get(
        "/task/{taskId}",
        response_model=StandardResponse,
        summary="Comments On Task",
        responses=COMMON_RESPONSES,
    )
    async def get_comments_by_task(taskId: str):
        return envelope_response(await comment_service.get_comments_by_task(taskId))

    @router.get(
        "/user/{userId}",
        response_model=StandardResponse,
        summary="Comments By User",
        responses=COMMON_RESPONSES,
    )
    async def get_comments_by_user(userId: str):
        return envelope_response(await comment_service.get_comments_by_user(userId))

    @router.get(
        "/content/{content}",
        response_model=StandardResponse,
        summary="Comments By Content",
        description="Exact match on the comment text",
        responses=COMMON_RESPONSES,
    )
    async def get_comments_by_content(content: str):
        return envelope_response(await comment_service.get_comments_by_content(content))

    return router
