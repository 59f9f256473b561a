from typing import Optional

from pydantic import BaseModel


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request (validated by the domain layer)"""
    username: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """DTO for user response (no password or hash)"""
    id: str
    username: str
    name: Optional[str] = None
