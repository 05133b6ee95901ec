"""
API Routes.
"""

from .activity_routes import create_activity_routes
from .auth_routes import create_auth_routes
from .comment_routes import create_comment_routes
from .health_routes import create_health_routes
from .label_routes import create_label_routes
from .project_routes import create_project_routes
from .task_routes import create_task_routes

__all__ = [
    "create_activity_routes",
    "create_auth_routes",
    "create_comment_routes",
    "create_health_routes",
    "create_label_routes",
    "create_project_routes",
    "create_task_routes",
]
