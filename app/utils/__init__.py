"""Utility modules for the blog list application."""

from .list_helper import total_likes, favorite_blog

__all__ = [
    "total_likes",
    "favorite_blog",
]
