"""Plant state API routes."""
from fastapi import APIRouter, Depends

from plant_companion import PlantStateStore

from ..dependencies import get_store
from ..models.plant import PlantStatus, MoodUpdate, MoodUpdateResponse, GrowResponse

router = APIRouter(prefix="/api/plant", tags=["Plant"])


@router.get("", response_model=PlantStatus)
async def get_plant(store: PlantStateStore = Depends(get_store)):
    """Get the plant's current growth, streak, mood and name."""
    return PlantStatus.from_record(store.snapshot())


@router.post("/mood", response_model=MoodUpdateResponse)
async def update_mood(update: MoodUpdate, store: PlantStateStore = Depends(get_store)):
    """Set how the user is feeling. Only the current mood changes."""
    record = store.set_mood(update.mood)
    return MoodUpdateResponse(
        mood=record.current_mood,
        notification=f"You're feeling {record.current_mood.value} today. Your plant understands! 🌱",
        plant=PlantStatus.from_record(record),
    )


@router.post("/grow", response_model=GrowResponse)
async def grow_plant(store: PlantStateStore = Depends(get_store)):
    """
    Grow the plant for today.

    Growth, streak and the interaction count advance at most once per
    calendar day; repeated calls return grew=false.
    """
    result = store.grow()
    return GrowResponse(
        grew=result.grew,
        growth_increment=result.growth_increment,
        new_streak=result.new_streak,
        message=result.message,
        streak_bonus=result.streak_bonus,
        plant=PlantStatus.from_record(store.snapshot()),
    )
