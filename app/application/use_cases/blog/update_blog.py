# Standard library imports
import logging

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.exceptions import NotFoundError
from ....domain.validation import validate_blog
from ...dto.blog_dto import BlogRequest, BlogResponse
from .mapping import to_blog_response

logger = logging.getLogger(__name__)


class UpdateBlogUseCase:
    """Use case for replacing the fields of an existing blog"""
    
    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self, blog_id: str, request: BlogRequest) -> BlogResponse:
        """
        Replace title, author, url and likes of a blog
        
        The request is validated like a new blog: a full replacement, not a patch.
        
        Args:
            blog_id: ID of the blog to update
            request: New blog fields
            
        Returns:
            BlogResponse with the updated blog
            
        Raises:
            ValidationError: If the new fields are invalid
            NotFoundError: If no blog has that ID
        """
        blog = validate_blog(request.model_dump(), blog_id=blog_id)
        updated_blog = await self.blog_repository.update(blog)
        if updated_blog is None:
            raise NotFoundError(f"Blog {blog_id} not found")
        logger.info(f"Updated blog {blog_id}")
        return to_blog_response(updated_blog)
