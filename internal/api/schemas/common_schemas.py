"""
Common API schemas shared across different endpoints.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class StandardResponse(BaseModel):
    """
    Standard API response format for all endpoints.

    - success: True when the operation completed
    - message: Success or error message
    - status: Mirrors the HTTP status code
    - data: Response data (optional)
    - error: Error kind (only present on failure)
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "success": True,
                    "message": "Task created successfully",
                    "status": 200,
                    "data": "0b7f6c1e-2f5d-4a8e-9d0c-3f1f9a6f2e11",
                },
                {
                    "success": False,
                    "message": "Error fetching task: Task not found",
                    "status": 404,
                    "error": "NOT_FOUND",
                },
            ]
        }
    )

    success: bool
    message: str
    status: int
    data: Optional[Any] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Response model for health check (internal use)."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "service": "TaskFlow",
                    "version": "1.0.0",
                    "database": "connected",
                }
            ]
        }
    )

    status: str
    service: str
    version: str
    database: str
