"""
Post creation use case.

Looks up the owner, mints a prediction post for their personality class
and persists it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from prediction_diary.domain.exceptions import UserNotFoundException
from prediction_diary.shared.logging import get_logger

if TYPE_CHECKING:
    from prediction_diary.application.interfaces import (IPostRepository,
                                                         IPostService,
                                                         IUserRepository)

logger = get_logger(__name__)


@dataclass(frozen=True)
class AddNewPostInput:
    user_id: str


@dataclass(frozen=True)
class AddNewPostOutput:
    post: dict[str, Any]


class AddNewPostUseCase:
    """Add a new prediction post to a user's timeline"""

    def __init__(
        self,
        post_service: "IPostService",
        user_repo: "IUserRepository",
        post_repo: "IPostRepository",
    ) -> None:
        self.post_service = post_service
        self.user_repo = user_repo
        self.post_repo = post_repo

    async def handle(self, data: AddNewPostInput) -> AddNewPostOutput:
        """
        Create and store one post for the user.

        Raises:
            UserNotFoundException: If no user has the given ID
        """
        user = await self.user_repo.find_by_id(data.user_id)
        if user is None:
            logger.warning("Cannot add post: user %s not found", data.user_id)
            raise UserNotFoundException(data.user_id)

        post = self.post_service.create_post(user.id, user.personality_class)
        await self.post_repo.create(post)

        logger.info("Created post %s for user %s (deadline %d)", post.id, user.id, post.deadline)
        return AddNewPostOutput(post=post.serialize())
