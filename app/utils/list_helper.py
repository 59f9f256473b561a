"""
Aggregations over lists of blogs.

Every function accepts Blog domain objects or plain mappings (stored
documents, JSON payloads) with a ``likes`` entry, and never mutates its input.
"""

# Standard library imports
from typing import Any, Mapping, Optional, Sequence, TypeVar, Union

# Local application imports
from ..domain.constants import BlogFields
from ..domain.models.blog import Blog


BlogLike = Union[Blog, Mapping[str, Any]]
T = TypeVar("T", Blog, Mapping[str, Any])


def _likes_of(blog: BlogLike) -> int:
    if isinstance(blog, Mapping):
        likes = blog.get(BlogFields.LIKES)
    else:
        likes = blog.likes
    return likes or 0


def total_likes(blogs: Sequence[BlogLike]) -> int:
    """Sum of likes across all blogs; 0 for an empty list."""
    return sum(_likes_of(blog) for blog in blogs)


def favorite_blog(blogs: Sequence[T]) -> Optional[T]:
    """
    Return the blog with the most likes, or None for an empty list.
    
    Scans left to right and only replaces the current favorite on a strictly
    greater like count, so among tied blogs the earliest one wins. The first
    blog is taken unconditionally, which makes an all-zero list return it.
    """
    favorite: Optional[T] = None
    favorite_likes = 0
    for blog in blogs:
        likes = _likes_of(blog)
        if favorite is None or likes > favorite_likes:
            favorite = blog
            favorite_likes = likes
    return favorite
