from .mongo_connection import get_database, get_blog_collection, get_user_collection, ping_database
from .mongo_blog_repository import MongoBlogRepository
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "get_database",
    "get_blog_collection",
    "get_user_collection",
    "ping_database",
    "MongoBlogRepository",
    "MongoUserRepository",
]
