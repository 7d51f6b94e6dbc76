""" Repository module for the persistence layer. """

from prediction_diary.infrastructure.persistence.repositories.base import \
    DatabaseRepository
from prediction_diary.infrastructure.persistence.repositories.memory_repo import (
    MemoryPostRepository, MemoryUserRepository)
from prediction_diary.infrastructure.persistence.repositories.post_repo import \
    DatabasePostRepository
from prediction_diary.infrastructure.persistence.repositories.user_repo import \
    DatabaseUserRepository

__all__ = [
    "DatabaseRepository",
    "DatabaseUserRepository",
    "DatabasePostRepository",
    "MemoryUserRepository",
    "MemoryPostRepository",
]
