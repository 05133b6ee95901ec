"""
API Schemas (Request/Response Models).
"""

from .common_schemas import (
    StandardResponse,
    HealthResponse,
)

__all__ = [
    # Common schemas
    "StandardResponse",
    "HealthResponse",
]
