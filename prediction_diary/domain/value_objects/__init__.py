"""Domain value objects."""

from prediction_diary.domain.value_objects.personality import PersonalityClass

__all__ = [
    "PersonalityClass",
]
