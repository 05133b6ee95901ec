"""
Profile repository for user profile documents.
Profiles are keyed by the identity provider uid.
"""

from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from core.logger import logger
from repositories.base_repository import BaseRepository
from repositories.interfaces import IProfileRepository
from repositories.models import PROFILE_COLLECTION


class ProfileRepository(BaseRepository, IProfileRepository):
    """Repository for user profiles."""

    def __init__(self, database: Optional[AsyncIOMotorDatabase] = None):
        super().__init__(PROFILE_COLLECTION, database)
        logger.debug(f"ProfileRepository initialized for collection: {self.collection_name}")

    async def ensure_profile(self, uid: str, profile: Dict[str, Any]) -> bool:
        created = await self.insert_if_absent(uid, profile)
        if created:
            logger.info(f"Profile created: uid={uid}")
        else:
            logger.debug(f"Profile already present: uid={uid}")
        return created

    async def find_by_uid(self, uid: str) -> Optional[Dict[str, Any]]:
        return await self.find_by_id(uid)
