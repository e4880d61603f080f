"""Daily Boost data models."""
import datetime

from pydantic import BaseModel

from plant_companion import Mood


class DailyBoostResponse(BaseModel):
    """Today's joke, thought and growth tip."""

    date: datetime.date
    mood: Mood
    joke: str
    thought: str
    tip: str
