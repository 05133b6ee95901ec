"""
MongoDB connection using Motor (async driver).
Includes detailed logging and comprehensive error handling.
"""

from typing import Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from core.config import get_settings
from core.logger import logger

# Equality-lookup fields per collection
COLLECTION_INDEXES: Dict[str, List[str]] = {
    "tasks": ["assignedBy", "assignedTo", "status", "projectId"],
    "projects": ["createdBy", "teamMembers"],
    "comments": ["taskId", "userId"],
    "labels": ["createdBy", "name", "color"],
    "activities": ["taskId", "userId", "action"],
}


def _mask_url(url: str) -> str:
    """Hide the password part of a MongoDB URL for logging."""
    if "@" not in url:
        return url
    credentials, host = url.split("@", 1)
    if "://" in credentials:
        protocol, user_info = credentials.split("://", 1)
        user = user_info.split(":")[0]
        return f"{protocol}://{user}:****@{host}"
    return url


class MongoDB:
    """MongoDB connection manager with async support."""

    def __init__(self):
        """Initialize MongoDB connection manager."""
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None
        logger.debug("MongoDB connection manager initialized")

    async def connect(self) -> None:
        """
        Establish connection to MongoDB.

        Raises:
            Exception: If connection fails
        """
        if self.client is not None:
            logger.debug("MongoDB already connected")
            return

        settings = get_settings()
        try:
            logger.info(
                f"Connecting to MongoDB: {_mask_url(settings.mongodb_connection_url)}"
            )
            logger.debug(f"Database name: {settings.mongodb_database}")

            self.client = AsyncIOMotorClient(
                settings.mongodb_connection_url,
                maxPoolSize=settings.mongodb_max_pool_size,
                minPoolSize=settings.mongodb_min_pool_size,
                serverSelectionTimeoutMS=5000,
                connectTimeoutMS=10000,
                socketTimeoutMS=10000,
            )

            await self.client.admin.command("ping")
            self.db = self.client[settings.mongodb_database]

            logger.info(f"Connected to MongoDB database: {settings.mongodb_database}")
            logger.debug(
                f"Connection pool: min={settings.mongodb_min_pool_size}, "
                f"max={settings.mongodb_max_pool_size}"
            )

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            logger.exception("MongoDB connection error details:")
            self.client = None
            self.db = None
            raise

    async def disconnect(self) -> None:
        """
        Close MongoDB connection.

        Safe to call even if not connected.
        """
        if self.client is None:
            logger.debug("MongoDB client not initialized, nothing to disconnect")
            return

        try:
            logger.info("Disconnecting from MongoDB...")
            self.client.close()
            logger.info("Disconnected from MongoDB")
        except Exception as e:
            logger.error(f"Error disconnecting from MongoDB: {e}")
            logger.exception("MongoDB disconnection error details:")
        finally:
            self.client = None
            self.db = None

    def get_collection(self, collection_name: str):
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection to access

        Returns:
            Motor collection object

        Raises:
            RuntimeError: If database is not connected
        """
        if self.db is None:
            error_msg = "Database not connected. Call connect() first."
            logger.error(error_msg)
            raise RuntimeError(error_msg)

        return self.db[collection_name]

    async def health_check(self) -> bool:
        """
        Check if MongoDB connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        if self.client is None:
            logger.warning("MongoDB client not initialized")
            return False

        try:
            await self.client.admin.command("ping")
            logger.debug("MongoDB health check passed")
            return True
        except Exception as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False

    async def create_indexes(self) -> None:
        """
        Create indexes for the equality lookups every resource exposes.

        This should be called during application startup.
        """
        try:
            logger.info("Creating MongoDB indexes...")

            for collection_name, fields in COLLECTION_INDEXES.items():
                collection = self.get_collection(collection_name)
                for field in fields:
                    await collection.create_index(field)
                logger.debug(f"Indexes ensured on {collection_name}: {fields}")

            logger.info("MongoDB indexes created successfully")

        except Exception as e:
            # Indexes only speed up lookups, the service works without them
            logger.error(f"Failed to create indexes: {e}")
            logger.exception("Index creation error details:")


# Global instance
_mongodb: Optional[MongoDB] = None


async def get_database() -> MongoDB:
    """
    Get or create global MongoDB instance.

    Returns:
        Connected MongoDB instance
    """
    global _mongodb

    if _mongodb is None:
        logger.info("Initializing MongoDB connection...")
        _mongodb = MongoDB()

    await _mongodb.connect()
    return _mongodb


async def close_database() -> None:
    """
    Close global MongoDB connection.

    This should be called during application shutdown.
    """
    global _mongodb

    if _mongodb is None:
        logger.debug("No global MongoDB connection to close")
        return

    logger.info("Closing global MongoDB connection...")
    await _mongodb.disconnect()
    _mongodb = None
    logger.info("Global MongoDB connection closed")
