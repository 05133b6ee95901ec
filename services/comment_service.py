"""
Comment service.
"""

from typing import Optional

from repositories.comment_repository import CommentRepository
from repositories.models import CommentModel
from repositories.schema import ResourceSchema
from services.envelope import Envelope
from services.resource_service import ResourceService


class CommentService(ResourceService):
    """Service for task comments. The author is recorded as `userId`."""

    def __init__(self, repository: Optional[CommentRepository] = None):
        super().__init__(
            repository or CommentRepository(),
            ResourceSchema(CommentModel),
            entity_name="comment",
            owner_field="userId",
        )

    async def get_comments_by_task(self, task_id: Optional[str]) -> Envelope:
        return await self.query_by_field("taskId", task_id)

    async def get_comments_by_user(self, user_id: Optional[str]) -> Envelope:
        return await self.query_by_field("userId", user_id)

    async def get_comments_by_content(self, content: Optional[str]) -> Envelope:
        """Exact-match lookup on the comment text."""
        return await self.query_by_field("content", content)
