from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.blog import Blog


class BlogRepository(ABC):
    """Repository interface - defines contract for blog data access"""
    
    @abstractmethod
    async def find_all(self) -> List[Blog]:
        """Return every stored blog"""
        pass
    
    @abstractmethod
    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        """Find blog by ID"""
        pass
    
    @abstractmethod
    async def insert(self, blog: Blog) -> Blog:
        """Insert a new blog and return it with its assigned ID"""
        pass
    
    @abstractmethod
    async def update(self, blog: Blog) -> Optional[Blog]:
        """Replace the mutable fields of an existing blog, None if it does not exist"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, blog_id: str) -> bool:
        """Delete blog by ID, True if a record was removed"""
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Number of stored blogs"""
        pass
