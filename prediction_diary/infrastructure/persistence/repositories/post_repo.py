from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from prediction_diary.domain.entities import PostEntity
from prediction_diary.infrastructure.persistence.models.post import Post
from prediction_diary.infrastructure.persistence.repositories.base import \
    DatabaseRepository


class DatabasePostRepository(DatabaseRepository[Post, PostEntity]):
    """Repository for posts stored in the ``post`` table"""

    entity_type = "post"

    def __init__(self, db: AsyncSession):
        super().__init__(db, Post)

    def _to_entity(self, row: Post) -> PostEntity:
        return PostEntity(
            id=row.id,
            title=row.title,
            description=row.description,
            image=row.image,
            deadline=row.deadline,
            owner=row.owner,
        )

    def _to_model(self, entity: PostEntity) -> Post:
        return Post(**entity.serialize())

    async def put(self, post: PostEntity) -> None:
        """Upsert: merge replaces every column of the row with the same ID"""
        with self._translate_errors("put"):
            await self.db.merge(self._to_model(post))
            await self.db.flush()

    async def find_by_owner_id(self, user_id: str) -> list[PostEntity]:
        """Get all posts owned by a user"""
        with self._translate_errors("find_by_owner_id"):
            result = await self.db.execute(select(Post).where(Post.owner == user_id))
            rows = list(result.scalars().all())
        return [self._to_entity(row) for row in rows]
