# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..constants import BlogFields
from ..exceptions import InvalidValueError, MissingFieldError


@dataclass
class Blog:
    """
    Pure domain model for Blog entity.
    
    A blog post is a link (url) with a title, an optional free-text author
    and a like counter. Constructing a Blog validates and normalizes it:
    a missing like counter becomes 0.
    """
    id: Optional[str]
    title: str
    url: str
    author: Optional[str] = None
    likes: Optional[int] = 0
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.title:
            raise MissingFieldError(BlogFields.TITLE)
        if not self.url:
            raise MissingFieldError(BlogFields.URL)
        if self.likes is None:
            self.likes = 0
        # bool is an int subclass, but True is not a like count
        if isinstance(self.likes, bool) or not isinstance(self.likes, int):
            raise InvalidValueError(
                BlogFields.LIKES,
                "must be an integer",
                message="likes must be a non-negative integer",
            )
        if self.likes < 0:
            raise InvalidValueError(
                BlogFields.LIKES,
                "must not be negative",
                message="likes must be a non-negative integer",
            )
