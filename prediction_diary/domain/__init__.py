"""
Domain layer - Enterprise Business Rules.

This is the innermost layer containing business entities, value objects,
and domain exceptions. It has no dependencies on other layers.
"""

from prediction_diary.domain.entities import PostEntity, UserEntity
from prediction_diary.domain.exceptions import (DiaryException,
                                                PostNotFoundException,
                                                ResourceNotFoundException,
                                                UserNotFoundException,
                                                ValidationException)
from prediction_diary.domain.value_objects import PersonalityClass

__all__ = [
    # Entities
    "PostEntity",
    "UserEntity",
    # Value Objects
    "PersonalityClass",
    # Exceptions
    "DiaryException",
    "ValidationException",
    "ResourceNotFoundException",
    "UserNotFoundException",
    "PostNotFoundException",
]
