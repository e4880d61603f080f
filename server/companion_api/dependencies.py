"""Shared application objects, exposed as FastAPI dependencies."""
import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends

from plant_companion import (
    DailyBoost,
    InsightAggregator,
    JsonFileStorage,
    PlantCompanion,
    PlantStateStore,
    ReplyBackend,
    create_backend,
)

from .config import get_settings

log = logging.getLogger(__name__)


@lru_cache
def get_store() -> PlantStateStore:
    """The session's plant store, loaded once from the storage file."""
    settings = get_settings()
    return PlantStateStore(JsonFileStorage(settings.storage_file), plant_name=settings.plant_name)


@lru_cache
def get_backend() -> Optional[ReplyBackend]:
    """The configured text backend, or None when the configuration is unusable."""
    settings = get_settings()
    if settings.reply_backend == "gemini":
        if not settings.gemini_api_key:
            return None
        return create_backend(
            "gemini",
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
        )
    if settings.reply_backend == "local":
        return create_backend(
            "local",
            url=settings.local_llm_url,
            model=settings.local_llm_model,
            timeout=settings.llm_timeout,
        )
    log.warning(f"[API] No reply backend for '{settings.reply_backend}'")
    return None


@lru_cache
def get_companion() -> PlantCompanion:
    return PlantCompanion(backend=get_backend())


@lru_cache
def get_daily_boost() -> DailyBoost:
    settings = get_settings()
    backend = get_backend() if settings.daily_boost_from_backend else None
    return DailyBoost(backend=backend)


def get_insights(store: PlantStateStore = Depends(get_store)) -> InsightAggregator:
    return InsightAggregator(store)
