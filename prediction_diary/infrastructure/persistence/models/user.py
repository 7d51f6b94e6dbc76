from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from prediction_diary.infrastructure.persistence.database import Base


class User(Base):
    """
    Stored user document.

    ``personality_class`` keeps the nested ``{"outdoor", "extrovert"}`` object as JSON.
    """

    __tablename__ = "user"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    personality_class: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
