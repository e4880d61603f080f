"""Mood insight data models."""
import datetime

from pydantic import BaseModel, Field, ConfigDict

from plant_companion import Mood


class MoodLogEntry(BaseModel):
    """One day's logged mood."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    date: datetime.date
    mood: Mood
    mood_score: int = Field(serialization_alias="moodScore")


class Milestone(BaseModel):
    """Next growth milestone."""

    icon: str
    label: str


class InsightsSummary(BaseModel):
    """Weekly mood statistics and plant counters."""

    model_config = ConfigDict(populate_by_name=True)

    weekly_happy_days: int = Field(serialization_alias="weeklyHappyDays")
    average_weekly_mood: float = Field(serialization_alias="averageWeeklyMood")
    weekly_mood_label: str = Field(serialization_alias="weeklyMoodLabel")
    total_interactions: int = Field(serialization_alias="totalInteractions")
    current_streak: int = Field(serialization_alias="currentStreak")
    growth_level: int = Field(serialization_alias="growthLevel")
    next_milestone: Milestone = Field(serialization_alias="nextMilestone")
