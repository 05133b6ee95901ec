"""
Service layer implementing business logic.
Follows Service Layer Pattern and Single Responsibility Principle.
"""

from .activity_service import ActivityService
from .auth_service import AuthService
from .comment_service import CommentService
from .envelope import Envelope
from .label_service import LabelService
from .project_service import ProjectService
from .resource_service import ResourceService
from .task_service import TaskService

__all__ = [
    "ActivityService",
    "AuthService",
    "CommentService",
    "Envelope",
    "LabelService",
    "ProjectService",
    "ResourceService",
    "TaskService",
]
