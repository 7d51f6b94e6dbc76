"""
Controller translating use case outputs into response DTOs.

Posts without an uploaded image get a placeholder: the "unuploaded" image
while the deadline is still ahead, the "failed" image once it has passed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from prediction_diary.application.use_cases import (AddNewPostInput,
                                                    CreateAccountInput,
                                                    CreateAccountOutput,
                                                    EditPostInput,
                                                    GetUserTimelineInput)
from prediction_diary.domain.entities import PostEntity
from prediction_diary.presentation.api.v1.schemas.post import PostResponse
from prediction_diary.shared.clock import Clock, as_utc, utc_now

if TYPE_CHECKING:
    from prediction_diary.application.interfaces import IUnitOfWork
    from prediction_diary.application.use_cases import (
        AddNewPostUseCase, CreateAccountUseCase, EditPostUseCase,
        GetUserTimelineUseCase)
    from prediction_diary.domain.value_objects import PersonalityClass


@dataclass(frozen=True)
class ImagePlaceholders:
    unuploaded: str
    failed: str


class DiaryController:
    """
    Write operations commit the unit of work before returning, so the caller
    only sees a result once it is durable.
    """

    def __init__(
        self,
        create_account_use_case: "CreateAccountUseCase",
        add_new_post_use_case: "AddNewPostUseCase",
        get_user_timeline_use_case: "GetUserTimelineUseCase",
        edit_post_use_case: "EditPostUseCase",
        images: ImagePlaceholders,
        clock: Clock | None = None,
        unit_of_work: "IUnitOfWork | None" = None,
    ) -> None:
        self.create_account_use_case = create_account_use_case
        self.add_new_post_use_case = add_new_post_use_case
        self.get_user_timeline_use_case = get_user_timeline_use_case
        self.edit_post_use_case = edit_post_use_case
        self.images = images
        self.clock = clock or utc_now
        self.unit_of_work = unit_of_work

    async def _commit(self) -> None:
        if self.unit_of_work is not None:
            await self.unit_of_work.commit()

    async def create_account(self, personality_class: "PersonalityClass") -> CreateAccountOutput:
        output = await self.create_account_use_case.handle(
            CreateAccountInput(personality_class=personality_class)
        )
        await self._commit()
        return output

    async def add_new_post(self, owner_id: str) -> PostResponse:
        output = await self.add_new_post_use_case.handle(AddNewPostInput(user_id=owner_id))
        await self._commit()
        return self.to_post_response(output.post)

    async def get_user_timeline(self, user_id: str) -> list[PostResponse]:
        output = await self.get_user_timeline_use_case.handle(GetUserTimelineInput(user_id=user_id))
        now = self.clock()
        return [self.to_post_response(post, now) for post in output.posts]

    async def edit_post(self, post_id: str, image: str, description: str) -> PostResponse:
        output = await self.edit_post_use_case.handle(
            EditPostInput(post_id=post_id, description=description, image=image)
        )
        await self._commit()
        return self.to_post_response(output.post)

    def to_post_response(self, data: dict[str, Any], now: datetime | None = None) -> PostResponse:
        post = PostEntity.from_dict(data)
        return PostResponse(
            id=post.id,
            title=post.title,
            description=post.description,
            image=self.display_image(post, now or self.clock()),
            deadline=post.deadline,
            owner=post.owner,
        )

    def display_image(self, post: PostEntity, now: datetime) -> str:
        """Naive ``now`` values are taken as UTC."""
        if post.image is not None:
            return post.image
        if post.is_past_deadline(as_utc(now).timestamp()):
            return self.images.failed
        return self.images.unuploaded
