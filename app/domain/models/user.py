from dataclasses import dataclass
from typing import Optional

from ..constants import UserFields, USERNAME_MIN_LENGTH
from ..exceptions import InvalidValueError, MissingFieldError


@dataclass
class User:
    """Pure domain model for User entity - holds a password hash, never a password"""
    id: Optional[str]
    username: str
    password_hash: str
    name: Optional[str] = None

    def __post_init__(self):
        """Business validations"""
        if not self.username:
            raise MissingFieldError(
                UserFields.USERNAME,
                message="User validation failed: username: Path `username` is required.",
            )
        if len(self.username) < USERNAME_MIN_LENGTH:
            raise InvalidValueError(
                UserFields.USERNAME,
                f"shorter than {USERNAME_MIN_LENGTH}",
                message=(
                    f"User validation failed: username: Path `username` (`{self.username}`) "
                    f"is shorter than the minimum allowed length ({USERNAME_MIN_LENGTH})."
                ),
            )
        if not self.password_hash:
            raise MissingFieldError(UserFields.PASSWORD_HASH, message="Password hash is required")
