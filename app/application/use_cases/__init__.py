from .blog import (
    ListBlogsUseCase,
    GetBlogUseCase,
    CreateBlogUseCase,
    UpdateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogStatsUseCase,
)
from .user import (
    RegisterUserUseCase,
    ListUsersUseCase,
)

__all__ = [
    "ListBlogsUseCase",
    "GetBlogUseCase",
    "CreateBlogUseCase",
    "UpdateBlogUseCase",
    "DeleteBlogUseCase",
    "GetBlogStatsUseCase",
    "RegisterUserUseCase",
    "ListUsersUseCase",
]
