# Standard library imports
import logging

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeleteBlogUseCase:
    """Use case for deleting a blog"""
    
    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self, blog_id: str) -> None:
        """
        Delete a blog by ID
        
        Raises:
            NotFoundError: If no blog has that ID
        """
        deleted = await self.blog_repository.delete_by_id(blog_id)
        if not deleted:
            raise NotFoundError(f"Blog {blog_id} not found")
        logger.info(f"Deleted blog {blog_id}")
