"""Chat data models."""
from pydantic import BaseModel, Field, ConfigDict, field_validator

from plant_companion import Mood


class ChatRequest(BaseModel):
    """A message from the user to the plant."""

    message: str = Field(max_length=2000)

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value.strip()


class ChatResponse(BaseModel):
    """The plant's reply."""

    model_config = ConfigDict(populate_by_name=True)

    reply: str
    mood: Mood
    from_fallback: bool = Field(serialization_alias="fromFallback")
