# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....domain.exceptions import NotFoundError
from ...dto.blog_dto import BlogResponse
from .mapping import to_blog_response


class GetBlogUseCase:
    """Use case for getting a blog by ID"""
    
    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self, blog_id: str) -> BlogResponse:
        """
        Get a blog by ID
        
        Args:
            blog_id: ID of the blog
            
        Returns:
            BlogResponse with blog information
            
        Raises:
            NotFoundError: If no blog has that ID
        """
        blog = await self.blog_repository.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError(f"Blog {blog_id} not found")
        return to_blog_response(blog)
