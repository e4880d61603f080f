"""Plant state data models."""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from plant_companion import Mood, PlantRecord, growth_stage


class PlantStatus(BaseModel):
    """Current plant state for display."""

    model_config = ConfigDict(populate_by_name=True)

    growth: int = Field(ge=0, le=100)
    chat_count: int = Field(ge=0, serialization_alias="chatCount")
    streak: int = Field(ge=0)
    current_mood: Mood = Field(serialization_alias="currentMood")
    plant_name: str = Field(serialization_alias="plantName")
    last_interaction: date = Field(serialization_alias="lastInteraction")
    growth_stage: str = Field(serialization_alias="growthStage")

    @classmethod
    def from_record(cls, record: PlantRecord) -> "PlantStatus":
        return cls(
            growth=record.growth,
            chat_count=record.chat_count,
            streak=record.streak,
            current_mood=record.current_mood,
            plant_name=record.plant_name,
            last_interaction=record.last_interaction,
            growth_stage=growth_stage(record.growth),
        )


class MoodUpdate(BaseModel):
    """Request body for selecting the current mood."""

    mood: Mood


class MoodUpdateResponse(BaseModel):
    """Result of a mood selection."""

    model_config = ConfigDict(populate_by_name=True)

    mood: Mood
    notification: str
    plant: PlantStatus


class GrowResponse(BaseModel):
    """Result of a grow action, with the notification to show."""

    model_config = ConfigDict(populate_by_name=True)

    grew: bool
    growth_increment: float = Field(serialization_alias="growthIncrement")
    new_streak: int = Field(serialization_alias="newStreak")
    message: str
    streak_bonus: Optional[str] = Field(default=None, serialization_alias="streakBonus")
    plant: PlantStatus
