"""
CRUD endpoints shared by every entity router.
"""

from typing import Any

from fastapi import APIRouter, Body, Query

from core.logger import logger
from internal.api.schemas import StandardResponse
from internal.api.utils import envelope_response
from services.interfaces import IResourceService

COMMON_RESPONSES = {
    400: {"description": "Missing parameter or validation failure", "model": StandardResponse},
    404: {"description": "Entity not found", "model": StandardResponse},
    500: {"description": "Internal server error", "model": StandardResponse},
}


def add_crud_routes(router: APIRouter, service: IResourceService, entity: str) -> None:
    """
    Register create/get/update/delete (`?id=`) and `/list` on `router`.

    Args:
        router: Router carrying the entity prefix
        service: Service handling the entity
        entity: Singular entity name used in summaries
    """
    title = entity.capitalize()

    @router.post(
        "",
        response_model=StandardResponse,
        summary=f"Create {title}",
        description=f"Create a {entity} owned by the `userId` given in the body",
        responses=COMMON_RESPONSES,
    )
    async def create_entity(body: Any = Body(default=None)):
        """
        Create an entity.

        **Body:** the entity fields plus `userId`, the creating user.

        **Returns:** the new entity id.
        """
        owner_id = body.get("userId") if isinstance(body, dict) else None
        envelope = await service.create(body, owner_id)
        logger.debug(f"POST {router.prefix}: status={envelope.status}")
        return envelope_response(envelope)

    @router.get(
        "",
        response_model=StandardResponse,
        summary=f"Get {title}",
        responses=COMMON_RESPONSES,
    )
    async def get_entity(id: str = Query(default="", description=f"{title} ID")):
        return envelope_response(await service.get_by_id(id))

    @router.put(
        "",
        response_model=StandardResponse,
        summary=f"Update {title}",
        description="Partial update: only supplied fields change",
        responses=COMMON_RESPONSES,
    )
    async def update_entity(
        id: str = Query(default="", description=f"{title} ID"),
        body: Any = Body(default=None),
    ):
        envelope = await service.update(id, body)
        logger.debug(f"PUT {router.prefix}: id={id}, status={envelope.status}")
        return envelope_response(envelope)

    @router.delete(
        "",
        response_model=StandardResponse,
        summary=f"Delete {title}",
        description=f"Delete a {entity} and return it as it was before deletion",
        responses=COMMON_RESPONSES,
    )
    async def delete_entity(id: str = Query(default="", description=f"{title} ID")):
        envelope = await service.delete(id)
        logger.debug(f"DELETE {router.prefix}: id={id}, status={envelope.status}")
        return envelope_response(envelope)

    @router.get(
        "/list",
        response_model=StandardResponse,
        summary=f"List {title} Records",
        description="Every stored entity; an empty list is a success",
        responses=COMMON_RESPONSES,
    )
    async def list_entities():
        return envelope_response(await service.list_all())
