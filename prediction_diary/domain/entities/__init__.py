"""Domain entities."""

from prediction_diary.domain.entities.post import PostEntity
from prediction_diary.domain.entities.user import UserEntity

__all__ = [
    "PostEntity",
    "UserEntity",
]
