from .list_blogs import ListBlogsUseCase
from .get_blog import GetBlogUseCase
from .create_blog import CreateBlogUseCase
from .update_blog import UpdateBlogUseCase
from .delete_blog import DeleteBlogUseCase
from .get_blog_stats import GetBlogStatsUseCase

__all__ = [
    "ListBlogsUseCase",
    "GetBlogUseCase",
    "CreateBlogUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
    "GetBlogStatsUseCase",
]
