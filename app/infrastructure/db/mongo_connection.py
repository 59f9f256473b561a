# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import get_settings


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    The client connects lazily, so this never blocks on an unreachable server.
    
    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_blog_collection() -> AsyncIOMotorCollection:
    """
    Get blogs collection from MongoDB
    
    Returns:
        MongoDB collection for blogs
    """
    return get_database()["blogs"]


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


async def ping_database() -> bool:
    """Return True if the MongoDB server answers a ping"""
    try:
        await get_database().command("ping")
        return True
    except PyMongoError:
        return False


def close_database() -> None:
    """Close the MongoDB client and forget the singletons"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None
