from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request

from prediction_diary.application.services import PostService, UserService
from prediction_diary.application.use_cases import (AddNewPostUseCase,
                                                    CreateAccountUseCase,
                                                    EditPostUseCase,
                                                    GetUserTimelineUseCase)
from prediction_diary.infrastructure.config.settings import Settings
from prediction_diary.infrastructure.persistence.factory import (
    RepositoryBundle, RepositoryFactory, RepositoryProvider)
from prediction_diary.presentation.controller import (DiaryController,
                                                      ImagePlaceholders)
from prediction_diary.shared.clock import Clock, utc_now


@dataclass(frozen=True)
class AppContext:
    """Everything assembled once at startup and shared by all requests"""

    repository_provider: RepositoryProvider
    user_service: UserService
    post_service: PostService
    images: ImagePlaceholders
    clock: Clock


def build_app_context(
    settings: Settings,
    *,
    clock: Clock | None = None,
    repository_provider: RepositoryProvider | None = None,
) -> AppContext:
    """Wire services and storage from settings (no global singletons)"""
    clock = clock or utc_now
    return AppContext(
        repository_provider=repository_provider
        or RepositoryFactory.create_repository_provider(settings),
        user_service=UserService(),
        post_service=PostService(clock=clock, deadline_weekday=settings.deadline_weekday),
        images=ImagePlaceholders(
            unuploaded=settings.image_unuploaded_url, failed=settings.image_failed_url
        ),
        clock=clock,
    )


def get_app_context(request: Request) -> AppContext:
    return request.app.state.context


async def get_repositories(
    context: Annotated[AppContext, Depends(get_app_context)],
) -> AsyncIterator[RepositoryBundle]:
    """
    Repositories for one request.
    For the database backend this is one transaction; the controller commits it
    before the response is built, and an error rolls it back.
    """
    async with context.repository_provider.session() as repositories:
        yield repositories


async def get_controller(
    context: Annotated[AppContext, Depends(get_app_context)],
    repositories: Annotated[RepositoryBundle, Depends(get_repositories)],
) -> DiaryController:
    return DiaryController(
        create_account_use_case=CreateAccountUseCase(context.user_service, repositories.users),
        add_new_post_use_case=AddNewPostUseCase(
            context.post_service, repositories.users, repositories.posts
        ),
        get_user_timeline_use_case=GetUserTimelineUseCase(repositories.posts),
        edit_post_use_case=EditPostUseCase(repositories.posts),
        images=context.images,
        clock=context.clock,
        unit_of_work=repositories,
    )
