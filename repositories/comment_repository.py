"""
Comment repository for MongoDB operations.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from core.logger import logger
from repositories.base_repository import BaseRepository
from repositories.models import COMMENTS_COLLECTION


class CommentRepository(BaseRepository):
    """Repository for comment documents."""

    def __init__(self, database: Optional[AsyncIOMotorDatabase] = None):
        super().__init__(COMMENTS_COLLECTION, database)
        logger.debug(f"CommentRepository initialized for collection: {self.collection_name}")
