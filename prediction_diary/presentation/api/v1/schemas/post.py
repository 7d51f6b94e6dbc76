from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for minting a new post"""

    uid: str = Field(..., min_length=1, description="Owner user ID")


class PostUpdate(BaseModel):
    """Schema for editing a post"""

    description: str
    image: str = Field(..., description="Reference (URL) of an uploaded image")


class PostResponse(BaseModel):
    """Schema for post response; ``image`` is the display image"""

    id: str
    title: str
    description: str
    image: str
    deadline: int = Field(..., description="Unix timestamp (seconds)")
    owner: str


class TimelineResponse(BaseModel):
    """Schema for a user's timeline"""

    model_config = ConfigDict(populate_by_name=True)

    items: list[PostResponse] = Field(default_factory=list, alias="list")
