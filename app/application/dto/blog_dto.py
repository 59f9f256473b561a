from typing import Optional

from pydantic import BaseModel, StrictInt


class BlogRequest(BaseModel):
    """
    DTO for blog create/replace requests.
    
    Every field is optional here so the domain validator, not pydantic,
    decides which required field is missing.
    """
    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    # Strict: true, "3" and 2.0 are rejected rather than coerced
    likes: Optional[StrictInt] = None


class BlogResponse(BaseModel):
    """DTO for blog response"""
    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int


class BlogStatsResponse(BaseModel):
    """DTO for blog list aggregations"""
    total_likes: int
    favorite: Optional[BlogResponse] = None
