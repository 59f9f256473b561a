from typing import TYPE_CHECKING
from ...domain.repositories.blog_repository import BlogRepository
from ...application.use_cases.blog import (
    ListBlogsUseCase,
    GetBlogUseCase,
    CreateBlogUseCase,
    UpdateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogStatsUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class BlogProvider:
    """Blog use case provider - registers all blog-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all blog use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            ListBlogsUseCase,
            GetBlogUseCase,
            CreateBlogUseCase,
            UpdateBlogUseCase,
            DeleteBlogUseCase,
            GetBlogStatsUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    blog_repository=container.get(BlogRepository)
                )
            )
