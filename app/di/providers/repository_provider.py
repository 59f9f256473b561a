from typing import TYPE_CHECKING
from ...domain.repositories.blog_repository import BlogRepository
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_blog_repository import MongoBlogRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            BlogRepository,
            MongoBlogRepository(blog_collection=container.get("blog_collection"))
        )
        
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )
