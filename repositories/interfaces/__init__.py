"""
Repository Interfaces.
"""

from .resource_repository_interface import IProfileRepository, IResourceRepository

__all__ = [
    "IProfileRepository",
    "IResourceRepository",
]
