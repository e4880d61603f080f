"""
Plant Companion Module.

A virtual plant whose growth and streak follow the user's daily mood,
with a persisted plant record, weekly mood insights and a chat companion
backed by a local or hosted text model.
"""

from .plant_state import (
    Mood,
    MoodLog,
    PlantRecord,
    GrowResult,
    PlantStateStore,
    mood_score,
)
from .storage import (
    STORAGE_KEY,
    PlantStorage,
    JsonFileStorage,
    InMemoryStorage,
    StorageError,
)
from .insights import (
    InsightAggregator,
    MoodInsights,
    describe_weekly_mood,
    growth_stage,
    next_milestone,
)
from .backends import (
    ReplyBackend,
    ReplyBackendError,
    LocalCompletionBackend,
    GeminiBackend,
    create_backend,
)
from .companion import PlantCompanion, CompanionReply
from .daily_boost import DailyBoost, BoostContent

__all__ = [
    "Mood",
    "MoodLog",
    "PlantRecord",
    "GrowResult",
    "PlantStateStore",
    "mood_score",
    "STORAGE_KEY",
    "PlantStorage",
    "JsonFileStorage",
    "InMemoryStorage",
    "StorageError",
    "InsightAggregator",
    "MoodInsights",
    "describe_weekly_mood",
    "growth_stage",
    "next_milestone",
    "ReplyBackend",
    "ReplyBackendError",
    "LocalCompletionBackend",
    "GeminiBackend",
    "create_backend",
    "PlantCompanion",
    "CompanionReply",
    "DailyBoost",
    "BoostContent",
]
