"""Daily Boost API routes."""
from fastapi import APIRouter, Depends

from plant_companion import DailyBoost, PlantStateStore

from ..dependencies import get_daily_boost, get_store
from ..models.motivation import DailyBoostResponse

router = APIRouter(prefix="/api/plant", tags=["Daily Boost"])


def _to_response(content) -> DailyBoostResponse:
    return DailyBoostResponse(
        date=content.day,
        mood=content.mood,
        joke=content.joke,
        thought=content.thought,
        tip=content.tip,
    )


@router.get("/daily-boost", response_model=DailyBoostResponse)
async def get_daily_boost_content(
    store: PlantStateStore = Depends(get_store),
    boost: DailyBoost = Depends(get_daily_boost),
):
    """Get today's joke, motivational thought and growth tip for the current mood."""
    return _to_response(await boost.today(store.snapshot().current_mood))


@router.post("/daily-boost/refresh", response_model=DailyBoostResponse)
async def refresh_daily_boost(
    store: PlantStateStore = Depends(get_store),
    boost: DailyBoost = Depends(get_daily_boost),
):
    """Pick a new joke, thought and tip."""
    return _to_response(await boost.refresh(store.snapshot().current_mood))
