# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ...dto.blog_dto import BlogResponse
from .mapping import to_blog_response


class ListBlogsUseCase:
    """Use case for listing all blogs"""
    
    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self) -> List[BlogResponse]:
        """
        List all blogs
        
        Returns:
            List of BlogResponse objects
        """
        blogs = await self.blog_repository.find_all()
        return [to_blog_response(blog) for blog in blogs]
