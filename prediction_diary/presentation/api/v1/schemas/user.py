from pydantic import BaseModel, StrictBool

from prediction_diary.domain.value_objects import PersonalityClass


class UserCreate(BaseModel):
    """Schema for creating an account from a personality class"""

    outdoor: StrictBool
    extrovert: StrictBool

    def to_personality_class(self) -> PersonalityClass:
        return PersonalityClass(outdoor=self.outdoor, extrovert=self.extrovert)


class UserCreated(BaseModel):
    uid: str
