"""Pydantic models for plant companion API responses."""
from .plant import PlantStatus, MoodUpdate, MoodUpdateResponse, GrowResponse
from .insights import MoodLogEntry, Milestone, InsightsSummary
from .chat import ChatRequest, ChatResponse
from .motivation import DailyBoostResponse

__all__ = [
    "PlantStatus",
    "MoodUpdate",
    "MoodUpdateResponse",
    "GrowResponse",
    "MoodLogEntry",
    "Milestone",
    "InsightsSummary",
    "ChatRequest",
    "ChatResponse",
    "DailyBoostResponse",
]
