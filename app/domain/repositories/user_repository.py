from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def insert(self, user: User) -> User:
        """
        Insert a new user.
        
        Raises UniquenessError when the username is taken; implementations
        must rely on the store's unique index, not a prior lookup.
        """
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Number of stored users"""
        pass
    
    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the unique index on username if it is missing"""
        pass
