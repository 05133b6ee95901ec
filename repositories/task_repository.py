"""
Task repository for MongoDB operations.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from core.logger import logger
from repositories.base_repository import BaseRepository
from repositories.models import TASKS_COLLECTION


class TaskRepository(BaseRepository):
    """Repository for task documents."""

    def __init__(self, database: Optional[AsyncIOMotorDatabase] = None):
        super().__init__(TASKS_COLLECTION, database)
        logger.debug(f"TaskRepository initialized for collection: {self.collection_name}")
