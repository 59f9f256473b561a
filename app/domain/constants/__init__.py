"""Constants for domain model field names"""

from .blog_fields import BlogFields
from .user_fields import (
    UserFields,
    USERNAME_MIN_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_MAX_BYTES,
)

__all__ = [
    "BlogFields",
    "UserFields",
    "USERNAME_MIN_LENGTH",
    "PASSWORD_MIN_LENGTH",
    "PASSWORD_MAX_BYTES",
]
