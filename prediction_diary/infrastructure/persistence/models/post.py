from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from prediction_diary.infrastructure.persistence.database import Base


class Post(Base):
    """
    Stored post document.

    ``owner`` is a plain indexed column, not a foreign key: owner existence
    is only checked when the post is created.
    """

    __tablename__ = "post"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image: Mapped[str | None] = mapped_column(Text)
    deadline: Mapped[int] = mapped_column(BigInteger, nullable=False)
    owner: Mapped[str] = mapped_column(String, nullable=False, index=True)
