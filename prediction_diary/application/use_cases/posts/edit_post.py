"""
Post editing use case.

Read-modify-write without a version check: two concurrent edits of the
same post resolve as last write wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from prediction_diary.domain.exceptions import PostNotFoundException
from prediction_diary.shared.logging import get_logger

if TYPE_CHECKING:
    from prediction_diary.application.interfaces import IPostRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class EditPostInput:
    post_id: str
    description: str
    image: str | None


@dataclass(frozen=True)
class EditPostOutput:
    post: dict[str, Any]


class EditPostUseCase:
    """Replace the description and image of an existing post"""

    def __init__(self, post_repo: "IPostRepository") -> None:
        self.post_repo = post_repo

    async def handle(self, data: EditPostInput) -> EditPostOutput:
        """
        Raises:
            PostNotFoundException: If no post has the given ID
        """
        post = await self.post_repo.find_by_id(data.post_id)
        if post is None:
            logger.warning("Cannot edit post: post %s not found", data.post_id)
            raise PostNotFoundException(data.post_id)

        post.change_image(data.image)
        post.change_description(data.description)
        await self.post_repo.put(post)

        logger.info("Edited post %s", post.id)
        return EditPostOutput(post=post.serialize())
