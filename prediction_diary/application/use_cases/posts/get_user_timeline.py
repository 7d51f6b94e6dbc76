"""Timeline retrieval use case."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from prediction_diary.application.interfaces import IPostRepository


@dataclass(frozen=True)
class GetUserTimelineInput:
    user_id: str


@dataclass(frozen=True)
class GetUserTimelineOutput:
    posts: list[dict[str, Any]] = field(default_factory=list)


class GetUserTimelineUseCase:
    """List every post owned by a user. An unknown user simply has no posts."""

    def __init__(self, post_repo: "IPostRepository") -> None:
        self.post_repo = post_repo

    async def handle(self, data: GetUserTimelineInput) -> GetUserTimelineOutput:
        posts = await self.post_repo.find_by_owner_id(data.user_id)
        return GetUserTimelineOutput(posts=[post.serialize() for post in posts])
