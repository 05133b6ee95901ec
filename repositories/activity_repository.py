"""
Activity repository for MongoDB operations.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from core.logger import logger
from repositories.base_repository import BaseRepository
from repositories.models import ACTIVITIES_COLLECTION


class ActivityRepository(BaseRepository):
    """Repository for activity documents."""

    def __init__(self, database: Optional[AsyncIOMotorDatabase] = None):
        super().__init__(ACTIVITIES_COLLECTION, database)
        logger.debug(f"ActivityRepository initialized for collection: {self.collection_name}")
