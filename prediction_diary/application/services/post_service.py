"""
Post service for minting weekly prediction posts.

Computes the title from the owner's personality class and the deadline
from the injected clock.
"""

import json
from collections.abc import Callable
from datetime import datetime, timedelta

from prediction_diary.application.services.user_service import new_id
from prediction_diary.domain.entities import PostEntity
from prediction_diary.domain.value_objects import PersonalityClass
from prediction_diary.shared.clock import Clock, as_utc, utc_now

SUNDAY = 6


class PostService:
    """
    Stateless factory for prediction posts.

    The deadline is the day after the next occurrence of ``deadline_weekday``
    strictly after the current time, keeping the current time of day.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        id_factory: Callable[[], str] | None = None,
        deadline_weekday: int = SUNDAY,
    ):
        if not 0 <= deadline_weekday <= 6:
            raise ValueError("deadline_weekday must be between 0 (Monday) and 6 (Sunday)")
        self.clock = clock or utc_now
        self.id_factory = id_factory or new_id
        self.deadline_weekday = deadline_weekday

    def create_post(self, owner_id: str, personality_class: PersonalityClass) -> PostEntity:
        return PostEntity(
            id=self.id_factory(),
            title=self.get_title(personality_class),
            description="",
            image=None,
            deadline=self.get_deadline(self.clock()),
            owner=owner_id,
        )

    def get_deadline(self, now: datetime) -> int:
        """
        Unix timestamp one day after the next deadline weekday following ``now``.

        A naive ``now`` is taken as UTC.
        """
        now = as_utc(now)
        days_ahead = (self.deadline_weekday - now.weekday()) % 7 or 7
        deadline = now + timedelta(days=days_ahead + 1)
        return int(deadline.timestamp())

    @staticmethod
    def get_title(personality_class: PersonalityClass) -> str:
        return f"Weekly prediction (personality class: {json.dumps(personality_class.to_dict())})"
