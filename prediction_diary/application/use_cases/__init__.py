"""Application use cases."""

from prediction_diary.application.use_cases.accounts.create_account import (
    CreateAccountInput, CreateAccountOutput, CreateAccountUseCase)
from prediction_diary.application.use_cases.posts.add_new_post import (
    AddNewPostInput, AddNewPostOutput, AddNewPostUseCase)
from prediction_diary.application.use_cases.posts.edit_post import (
    EditPostInput, EditPostOutput, EditPostUseCase)
from prediction_diary.application.use_cases.posts.get_user_timeline import (
    GetUserTimelineInput, GetUserTimelineOutput, GetUserTimelineUseCase)

__all__ = [
    "CreateAccountUseCase",
    "CreateAccountInput",
    "CreateAccountOutput",
    "AddNewPostUseCase",
    "AddNewPostInput",
    "AddNewPostOutput",
    "GetUserTimelineUseCase",
    "GetUserTimelineInput",
    "GetUserTimelineOutput",
    "EditPostUseCase",
    "EditPostInput",
    "EditPostOutput",
]
