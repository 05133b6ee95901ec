"""
Service Interfaces.
"""

from .auth_service_interface import IAuthService
from .resource_service_interface import IResourceService

__all__ = [
    "IAuthService",
    "IResourceService",
]
