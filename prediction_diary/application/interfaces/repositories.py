"""
Repository interfaces (ports) for the application layer.

Both the in-memory and the database backends satisfy these protocols.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from prediction_diary.domain.entities import PostEntity, UserEntity


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)"""

    async def create(self, user: UserEntity) -> None:
        """Insert a new user"""
        ...

    async def find_by_id(self, user_id: str) -> UserEntity | None:
        """Get user by ID, or None when absent"""
        ...


class IPostRepository(Protocol):
    """Protocol for post repository (DIP)"""

    async def create(self, post: PostEntity) -> None:
        """Insert a new post"""
        ...

    async def put(self, post: PostEntity) -> None:
        """Insert or replace the stored post with the same ID"""
        ...

    async def find_by_id(self, post_id: str) -> PostEntity | None:
        """Get post by ID, or None when absent"""
        ...

    async def find_by_owner_id(self, user_id: str) -> list[PostEntity]:
        """Get every post owned by a user"""
        ...


class IUnitOfWork(Protocol):
    """Protocol for making a request's writes durable (DIP)"""

    async def commit(self) -> None:
        """Commit pending writes; storage failures are raised, never swallowed"""
        ...
