"""Application services."""

from prediction_diary.application.services.post_service import PostService
from prediction_diary.application.services.user_service import UserService

__all__ = [
    "PostService",
    "UserService",
]
