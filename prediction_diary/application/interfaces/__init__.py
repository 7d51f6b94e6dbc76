"""
Application layer interfaces (ports).

These protocols define the contracts between the application layer
and the infrastructure layer, following the Dependency Inversion Principle.
"""

from prediction_diary.application.interfaces.repositories import (
    IPostRepository, IUnitOfWork, IUserRepository)
from prediction_diary.application.interfaces.services import (IPostService,
                                                              IUserService)

__all__ = [
    # Repository interfaces
    "IUserRepository",
    "IPostRepository",
    "IUnitOfWork",
    # Service interfaces
    "IUserService",
    "IPostService",
]
