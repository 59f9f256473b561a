"""
Exception hierarchy for the blog list domain.

Validation failures are structured, non-fatal rejections of a proposed write
and carry the offending field. Storage failures are a separate branch so the
API layer can answer them with a server error instead of a client error.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class BlogApiError(Exception):
    """Base exception for all blog list errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(BlogApiError):
    """Raised when a proposed record may not be persisted."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class MissingFieldError(ValidationError):
    """Raised when a required field is absent or empty."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"missing required field: {field}", field=field)


class InvalidValueError(ValidationError):
    """Raised when a field is present but violates a constraint."""

    def __init__(self, field: str, reason: str, message: Optional[str] = None):
        super().__init__(message or f"invalid value for {field}: {reason}", field=field)
        self.reason = reason


class UniquenessError(ValidationError):
    """Raised when the store rejects a write on a unique field."""

    def __init__(self, field: str):
        super().__init__(f"expected `{field}` to be unique", field=field)


# -----------------------------------------------------------------------------
# Lookup and storage
# -----------------------------------------------------------------------------


class NotFoundError(BlogApiError):
    """Raised when no record exists for an identifier."""
    pass


class StorageUnavailableError(BlogApiError):
    """Raised when the document store cannot be reached or fails."""
    pass


class CorruptRecordError(StorageUnavailableError):
    """Raised when a stored document no longer satisfies its model's rules."""
    pass
