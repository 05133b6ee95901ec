"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .base_repository import BaseRepository
from .activity_repository import ActivityRepository
from .comment_repository import CommentRepository
from .label_repository import LabelRepository
from .profile_repository import ProfileRepository
from .project_repository import ProjectRepository
from .task_repository import TaskRepository

__all__ = [
    "BaseRepository",
    "ActivityRepository",
    "CommentRepository",
    "LabelRepository",
    "ProfileRepository",
    "ProjectRepository",
    "TaskRepository",
]
