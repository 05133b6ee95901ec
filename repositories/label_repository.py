"""
Label repository for MongoDB operations.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from core.logger import logger
from repositories.base_repository import BaseRepository
from repositories.models import LABELS_COLLECTION


class LabelRepository(BaseRepository):
    """Repository for label documents."""

    def __init__(self, database: Optional[AsyncIOMotorDatabase] = None):
        super().__init__(LABELS_COLLECTION, database)
        logger.debug(f"LabelRepository initialized for collection: {self.collection_name}")
