"""
Post domain entity.

A prediction post is minted once a week for a user. Only its description
and image change after creation.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class PostEntity:
    """Domain entity for a prediction post"""

    id: str
    title: str
    description: str
    image: str | None
    deadline: int  # Unix timestamp (seconds)
    owner: str

    def is_past_deadline(self, timestamp: float) -> bool:
        """True once ``timestamp`` has reached the deadline."""
        return timestamp >= self.deadline

    def change_image(self, image: str | None) -> None:
        self.image = image

    def change_description(self, description: str) -> None:
        self.description = description

    def serialize(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "deadline": self.deadline,
            "owner": self.owner,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PostEntity":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            image=data.get("image"),
            deadline=int(data["deadline"]),
            owner=data["owner"],
        )
