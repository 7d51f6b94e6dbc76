"""
Service interfaces (ports) for the application layer.

These protocols define the contracts for the entity factories.
Following Dependency Inversion Principle (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from prediction_diary.domain.entities import PostEntity, UserEntity
    from prediction_diary.domain.value_objects import PersonalityClass


class IUserService(Protocol):
    """Protocol for user factory (DIP)"""

    def create_user(self, personality_class: PersonalityClass) -> UserEntity:
        """Build a new user with a fresh ID"""
        ...


class IPostService(Protocol):
    """Protocol for post factory (DIP)"""

    def create_post(self, owner_id: str, personality_class: PersonalityClass) -> PostEntity:
        """Build a new post with a computed title and deadline"""
        ...
