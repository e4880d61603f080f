"""
Insight Aggregator.

Read-only statistics derived from the plant's mood log, plus the labels
the stats view shows for them. Nothing here mutates or persists state.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import List

from .plant_state import Mood, MoodLog, PlantStateStore

# Average weekly mood reported when no mood was logged in the last week
NEUTRAL_MIDPOINT = 50.0


@dataclass
class MoodInsights:
    """Summary statistics for the stats view."""

    weekly_happy_days: int
    average_weekly_mood: float
    total_interactions: int
    current_streak: int
    growth_level: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "weekly_happy_days": self.weekly_happy_days,
            "average_weekly_mood": self.average_weekly_mood,
            "total_interactions": self.total_interactions,
            "current_streak": self.current_streak,
            "growth_level": self.growth_level,
        }


@dataclass
class Milestone:
    """Next growth milestone for the plant."""

    icon: str
    label: str


class InsightAggregator:
    """Derives statistics from the store's current record."""

    def __init__(self, store: PlantStateStore):
        self.store = store

    def mood_history(self, window_days: int = 30) -> List[MoodLog]:
        """
        Get mood logs from the last window_days days.

        Args:
            window_days: Positive number of days to look back

        Returns:
            Logs dated on or after today - window_days, oldest first

        Raises:
            ValueError: if window_days is not a positive integer
        """
        if isinstance(window_days, bool) or not isinstance(window_days, int) or window_days < 1:
            raise ValueError(f"window_days must be a positive integer, got {window_days!r}")

        cutoff = self.store.today() - timedelta(days=window_days)
        logs = [log for log in self.store.snapshot().mood_logs if log.date >= cutoff]
        return sorted(logs, key=lambda log: log.date)

    def insights(self) -> MoodInsights:
        """Weekly mood statistics together with the plant's counters."""
        record = self.store.snapshot()
        recent = self.mood_history(7)

        happy_days = sum(1 for log in recent if log.mood == Mood.HAPPY)
        if recent:
            average = sum(log.mood_score for log in recent) / len(recent)
        else:
            average = NEUTRAL_MIDPOINT

        return MoodInsights(
            weekly_happy_days=happy_days,
            average_weekly_mood=average,
            total_interactions=record.chat_count,
            current_streak=record.streak,
            growth_level=record.growth,
        )


def describe_weekly_mood(average_score: float) -> str:
    """Label for the average weekly mood score."""
    if average_score >= 70:
        return "Thriving"
    if average_score >= 50:
        return "Growing"
    return "Nurturing"


def growth_stage(growth: int) -> str:
    if growth < 30:
        return "seedling"
    if growth < 60:
        return "young plant"
    return "mature plant"


def next_milestone(growth: int) -> Milestone:
    """The next milestone to reach, or full bloom once past 75%."""
    if growth < 25:
        return Milestone(icon="🌱", label="25% - First Bloom")
    if growth < 50:
        return Milestone(icon="🌿", label="50% - Steady Growth")
    if growth < 75:
        return Milestone(icon="🌸", label="75% - Beautiful Flowers")
    return Milestone(icon="🌺", label="100% - Full Bloom Achieved!")
