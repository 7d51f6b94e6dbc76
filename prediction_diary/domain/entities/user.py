"""
User domain entity.

This represents the business concept of a diary user, independent of
how it's stored.
"""

from dataclasses import dataclass
from typing import Any

from prediction_diary.domain.value_objects import PersonalityClass


@dataclass(frozen=True)
class UserEntity:
    """A user is identified by id and never changes after creation."""

    id: str
    personality_class: PersonalityClass

    def serialize(self) -> dict[str, Any]:
        return {"id": self.id, "personalityClass": self.personality_class.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserEntity":
        return cls(
            id=data["id"],
            personality_class=PersonalityClass.from_dict(data["personalityClass"]),
        )
