from prediction_diary.infrastructure.persistence.models.post import Post
from prediction_diary.infrastructure.persistence.models.user import User

__all__ = [
    "User",
    "Post",
]
