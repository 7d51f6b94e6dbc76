"""Account creation use case."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from prediction_diary.shared.logging import get_logger

if TYPE_CHECKING:
    from prediction_diary.application.interfaces import (IUserRepository,
                                                         IUserService)
    from prediction_diary.domain.value_objects import PersonalityClass

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreateAccountInput:
    personality_class: PersonalityClass


@dataclass(frozen=True)
class CreateAccountOutput:
    id: str


class CreateAccountUseCase:
    """Create a user for a personality class and persist it"""

    def __init__(self, user_service: "IUserService", user_repo: "IUserRepository") -> None:
        self.user_service = user_service
        self.user_repo = user_repo

    async def handle(self, data: CreateAccountInput) -> CreateAccountOutput:
        user = self.user_service.create_user(data.personality_class)
        await self.user_repo.create(user)
        logger.info("Created account %s", user.id)
        return CreateAccountOutput(id=user.id)
