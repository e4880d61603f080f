"""API route modules."""
from .plant import router as plant_router
from .insights import router as insights_router
from .chat import router as chat_router
from .motivation import router as motivation_router

__all__ = [
    "plant_router",
    "insights_router",
    "chat_router",
    "motivation_router",
]
