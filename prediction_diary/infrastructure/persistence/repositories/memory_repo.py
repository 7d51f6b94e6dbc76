"""
In-memory repositories.

Entities are stored as serialized snapshots, so a caller mutating an entity
it got back does not change storage until it calls ``put``. No locking:
safe only for one request at a time.
"""

from typing import Any

from prediction_diary.domain.entities import PostEntity, UserEntity


class MemoryUserRepository:
    """Users keyed by ID in insertion order"""

    def __init__(self) -> None:
        self.users: dict[str, dict[str, Any]] = {}

    async def create(self, user: UserEntity) -> None:
        self.users[user.id] = user.serialize()

    async def find_by_id(self, user_id: str) -> UserEntity | None:
        data = self.users.get(user_id)
        return UserEntity.from_dict(data) if data is not None else None


class MemoryPostRepository:
    """Posts keyed by ID in insertion order"""

    def __init__(self) -> None:
        self.posts: dict[str, dict[str, Any]] = {}

    async def create(self, post: PostEntity) -> None:
        self.posts[post.id] = post.serialize()

    async def put(self, post: PostEntity) -> None:
        self.posts[post.id] = post.serialize()

    async def find_by_id(self, post_id: str) -> PostEntity | None:
        data = self.posts.get(post_id)
        return PostEntity.from_dict(data) if data is not None else None

    async def find_by_owner_id(self, user_id: str) -> list[PostEntity]:
        return [
            PostEntity.from_dict(data) for data in self.posts.values() if data["owner"] == user_id
        ]
