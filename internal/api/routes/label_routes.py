"""
Label API Routes.
"""

from fastapi import APIRouter

from core.config import get_settings
from internal.api.routes.resource_routes import COMMON_RESPONSES, add_crud_routes
from internal.api.schemas import StandardResponse
from internal.api.utils import envelope_response
from services.label_service import LabelService


def create_label_routes(label_service: LabelService) -> APIRouter:
    """Factory function to create label routes with dependency injection."""
    router = APIRouter(prefix=f"{get_settings().api_prefix}/labels", tags=["Labels"])
    add_crud_routes(router, label_service, "label")

    @router.get("/user/{userId}", response_model=StandardResponse, responses=COMMON_RESPONSES)
    async def get_labels_by_user(userId: str):
        return envelope_response(await label_service.get_labels_by_user(userId))

    @router.get("/color/{color}", response_model=StandardResponse, responses=COMMON_RESPONSES)
    async def get_labels_by_color(color: str):
        return envelope_response(await label_service.get_labels_by_color(color))

    @router.get("/name/{name}", response_model=StandardResponse, responses=COMMON_RESPONSES)
    async def get_labels_by_name(name: str):
        return envelope_response(await label_service.get_labels_by_name(name))

    return router
