"""
Health Check API Routes.
"""

from typing import Awaitable, Callable

from fastapi import APIRouter

from core.config import get_settings
from core.logger import logger
from internal.api.schemas import HealthResponse, StandardResponse
from internal.api.utils import envelope_response
from services.envelope import Envelope


def create_health_routes(check_database: Callable[[], Awaitable[bool]]) -> APIRouter:
    """
    Factory function to create health routes.

    Args:
        check_database: Coroutine function returning True when MongoDB answers

    Returns:
        APIRouter: Configured router with health endpoints
    """
    router = APIRouter(tags=["Health"])
    settings = get_settings()

    @router.get(
        "/",
        response_model=StandardResponse,
        summary="Root Endpoint",
        description="Get basic API information",
        operation_id="get_root",
    )
    async def root():
        """
        Root endpoint.

        Returns basic information about the API service including
        service name, version, and current status.
        """
        return envelope_response(
            Envelope.ok(
                "API service is running",
                data={
                    "service": settings.app_name,
                    "version": settings.app_version,
                    "status": "running",
                },
            )
        )

    @router.get(
        f"{settings.api_prefix}/health",
        response_model=StandardResponse,
        summary="Health Check",
        description="Check service health, including the MongoDB connection",
        operation_id="health_check",
        responses={
            200: {
                "description": "Health status",
                "content": {
                    "application/json": {
                        "example": {
                            "success": True,
                            "message": "Service is healthy",
                            "status": 200,
                            "data": {
                                "status": "healthy",
                                "service": "TaskFlow",
                                "version": "1.0.0",
                                "database": "connected",
                            },
                        }
                    }
                },
            }
        },
    )
    async def health_check():
        """
        Health check endpoint.

        **Returns:**
        - `healthy` when MongoDB answers
        - `degraded` when it does not; the API itself is still up
        """
        try:
            database_up = await check_database()
        except Exception as e:
            logger.error(f"Health check could not reach MongoDB: {e}")
            database_up = False

        health = HealthResponse(
            status="healthy" if database_up else "degraded",
            service=settings.app_name,
            version=settings.app_version,
            database="connected" if database_up else "disconnected",
        )
        message = "Service is healthy" if database_up else "Service is degraded"
        return envelope_response(Envelope.ok(message, data=health.model_dump()))

    return router
