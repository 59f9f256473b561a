from ....domain.models.blog import Blog
from ...dto.blog_dto import BlogResponse


def to_blog_response(blog: Blog) -> BlogResponse:
    """Map a stored Blog to its response DTO"""
    return BlogResponse(
        id=blog.id or "",
        title=blog.title,
        author=blog.author,
        url=blog.url,
        likes=blog.likes,
    )
