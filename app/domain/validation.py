"""
Validate-and-normalize entry points for incoming records.

Each function takes the raw fields of a proposed write and returns the
normalized domain model, or raises a ValidationError subclass naming the
field that failed. Uniqueness is not checked here; the user store enforces
it with a unique index at insert time.
"""

# Standard library imports
from typing import Any, Callable, Mapping, Optional

# Local application imports
from .constants import BlogFields, UserFields, PASSWORD_MIN_LENGTH, PASSWORD_MAX_BYTES
from .exceptions import InvalidValueError, MissingFieldError
from .models.blog import Blog
from .models.user import User


PasswordHasher = Callable[[str], str]


def validate_blog(payload: Mapping[str, Any], blog_id: Optional[str] = None) -> Blog:
    """
    Validate blog fields and return a normalized Blog.
    
    Args:
        payload: Raw blog fields (title, author, url, likes)
        blog_id: ID of the blog being replaced, None for a new blog
        
    Returns:
        Blog with likes defaulted to 0 when absent
        
    Raises:
        MissingFieldError: If title or url is missing or empty
        InvalidValueError: If likes is not a non-negative integer
    """
    return Blog(
        id=blog_id,
        title=payload.get(BlogFields.TITLE),
        url=payload.get(BlogFields.URL),
        author=payload.get(BlogFields.AUTHOR),
        likes=payload.get(BlogFields.LIKES),
    )


def validate_new_user(payload: Mapping[str, Any], hasher: PasswordHasher) -> User:
    """
    Validate registration fields and return a User holding only a password hash.
    
    Password rules are checked first, then username rules, and only then
    is the password hashed so a rejected request never pays the bcrypt cost.
    
    Args:
        payload: Raw registration fields (username, name, password)
        hasher: One-way salted hash function applied to the password
        
    Returns:
        User ready for insertion (id is None)
        
    Raises:
        MissingFieldError: If password or username is missing
        InvalidValueError: If password or username is too short, or password too long
    """
    password = payload.get(UserFields.PASSWORD)
    if not password:
        raise MissingFieldError(UserFields.PASSWORD, message="password required")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise InvalidValueError(
            UserFields.PASSWORD,
            f"shorter than {PASSWORD_MIN_LENGTH}",
            message=f"password must be at least {PASSWORD_MIN_LENGTH} characters long",
        )
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise InvalidValueError(
            UserFields.PASSWORD,
            f"longer than {PASSWORD_MAX_BYTES} bytes",
            message=f"password must be at most {PASSWORD_MAX_BYTES} bytes long",
        )
    
    # Run username validation with a placeholder hash before paying for bcrypt
    username = payload.get(UserFields.USERNAME)
    name = payload.get(UserFields.NAME)
    User(id=None, username=username, password_hash="-", name=name)
    
    return User(
        id=None,
        username=username,
        password_hash=hasher(password),
        name=name,
    )
