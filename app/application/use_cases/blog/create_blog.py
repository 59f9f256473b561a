# Standard library imports
import logging

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.validation import validate_blog
from ...dto.blog_dto import BlogRequest, BlogResponse
from .mapping import to_blog_response

logger = logging.getLogger(__name__)


class CreateBlogUseCase:
    """Use case for creating a new blog"""
    
    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self, request: BlogRequest) -> BlogResponse:
        """
        Create a new blog
        
        Args:
            request: Blog fields; likes defaults to 0 when omitted
            
        Returns:
            BlogResponse with created blog information
            
        Raises:
            ValidationError: If title or url is missing or likes is invalid
        """
        blog = validate_blog(request.model_dump())
        saved_blog = await self.blog_repository.insert(blog)
        logger.info(f"Created blog {saved_blog.id} ({saved_blog.title!r})")
        return to_blog_response(saved_blog)
