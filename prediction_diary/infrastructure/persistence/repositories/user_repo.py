from sqlalchemy.ext.asyncio import AsyncSession

from prediction_diary.domain.entities import UserEntity
from prediction_diary.domain.value_objects import PersonalityClass
from prediction_diary.infrastructure.persistence.models.user import User
from prediction_diary.infrastructure.persistence.repositories.base import \
    DatabaseRepository


class DatabaseUserRepository(DatabaseRepository[User, UserEntity]):
    """Repository for users stored in the ``user`` table"""

    entity_type = "user"

    def __init__(self, db: AsyncSession):
        super().__init__(db, User)

    def _to_entity(self, row: User) -> UserEntity:
        return UserEntity(
            id=row.id,
            personality_class=PersonalityClass.from_dict(row.personality_class),
        )

    def _to_model(self, entity: UserEntity) -> User:
        return User(id=entity.id, personality_class=entity.personality_class.to_dict())
