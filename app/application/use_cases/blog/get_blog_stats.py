# Local application imports
from ....domain.repositories.blog_repository import BlogRepository
from ....utils.list_helper import favorite_blog, total_likes
from ...dto.blog_dto import BlogStatsResponse
from .mapping import to_blog_response


class GetBlogStatsUseCase:
    """Use case for aggregating likes over all stored blogs"""
    
    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository
    
    async def execute(self) -> BlogStatsResponse:
        blogs = await self.blog_repository.find_all()
        favorite = favorite_blog(blogs)
        return BlogStatsResponse(
            total_likes=total_likes(blogs),
            favorite=to_blog_response(favorite) if favorite is not None else None,
        )
