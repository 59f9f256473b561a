"""
In-memory repositories used in place of MongoDB.

They implement the domain repository interfaces, including the unique
index on username, so use cases and controllers run unchanged on top of them.
"""
import uuid
from dataclasses import replace
from typing import Dict, List, Optional

from app.domain.exceptions import UniquenessError
from app.domain.models.blog import Blog
from app.domain.models.user import User
from app.domain.repositories.blog_repository import BlogRepository
from app.domain.repositories.user_repository import UserRepository


def _new_id() -> str:
    return uuid.uuid4().hex[:24]


class InMemoryBlogRepository(BlogRepository):
    def __init__(self) -> None:
        self._blogs: Dict[str, Blog] = {}

    async def find_all(self) -> List[Blog]:
        return [replace(blog) for blog in self._blogs.values()]

    async def find_by_id(self, blog_id: str) -> Optional[Blog]:
        blog = self._blogs.get(blog_id)
        return replace(blog) if blog else None

    def add(self, blog: Blog) -> Blog:
        stored = replace(blog, id=_new_id())
        self._blogs[stored.id] = stored
        return replace(stored)

    async def insert(self, blog: Blog) -> Blog:
        return self.add(blog)

    async def update(self, blog: Blog) -> Optional[Blog]:
        if blog.id not in self._blogs:
            return None
        self._blogs[blog.id] = replace(blog)
        return replace(blog)

    async def delete_by_id(self, blog_id: str) -> bool:
        return self._blogs.pop(blog_id, None) is not None

    async def count(self) -> int:
        return len(self._blogs)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    async def find_all(self) -> List[User]:
        return [replace(user) for user in self._users.values()]

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        return replace(user) if user else None

    async def insert(self, user: User) -> User:
        return self.add(user)

    def add(self, user: User) -> User:
        if any(existing.username == user.username for existing in self._users.values()):
            raise UniquenessError("username")
        stored = replace(user, id=_new_id())
        self._users[stored.id] = stored
        return replace(stored)

    async def count(self) -> int:
        return len(self._users)

    async def ensure_indexes(self) -> None:
        pass

    def raw_documents(self) -> List[dict]:
        """Stored records as plain dicts, for asserting what was persisted."""
        return [vars(user).copy() for user in self._users.values()]
