"""User factory."""

import uuid
from collections.abc import Callable

from prediction_diary.domain.entities import UserEntity
from prediction_diary.domain.value_objects import PersonalityClass


def new_id() -> str:
    """Random UUID4 in its textual form."""
    return str(uuid.uuid4())


class UserService:
    """Stateless factory for new users. Construct once and inject."""

    def __init__(self, id_factory: Callable[[], str] | None = None):
        self.id_factory = id_factory or new_id

    def create_user(self, personality_class: PersonalityClass) -> UserEntity:
        return UserEntity(id=self.id_factory(), personality_class=personality_class)
