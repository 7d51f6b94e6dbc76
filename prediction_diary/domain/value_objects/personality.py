from dataclasses import dataclass
from typing import Any

from prediction_diary.domain.exceptions import ValidationException


@dataclass(frozen=True)
class PersonalityClass:
    """
    Value object for a user's personality class.

    Two flags: outdoor (vs. indoor) and extrovert (vs. introvert).
    Used to generate the title of every post the user receives.
    """

    outdoor: bool
    extrovert: bool

    def __post_init__(self):
        for name in ("outdoor", "extrovert"):
            if not isinstance(getattr(self, name), bool):
                raise ValidationException(f"Personality flag '{name}' must be a boolean", name)

    def to_dict(self) -> dict[str, bool]:
        return {"outdoor": self.outdoor, "extrovert": self.extrovert}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PersonalityClass":
        missing = [key for key in ("outdoor", "extrovert") if key not in data]
        if missing:
            raise ValidationException(
                f"Personality class is missing: {', '.join(missing)}", missing[0]
            )
        return cls(outdoor=data["outdoor"], extrovert=data["extrovert"])
