from .blog_dto import BlogRequest, BlogResponse, BlogStatsResponse
from .user_dto import UserRegistrationRequest, UserResponse

__all__ = [
    "BlogRequest",
    "BlogResponse",
    "BlogStatsResponse",
    "UserRegistrationRequest",
    "UserResponse",
]
