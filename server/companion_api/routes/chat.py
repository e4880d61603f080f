"""Chat API routes.

Replies come from the configured text backend. Backend failures are
answered with a fallback reply, never with an error status.
"""
from fastapi import APIRouter, Depends

from plant_companion import PlantCompanion, PlantStateStore

from ..dependencies import get_companion, get_store
from ..models.chat import ChatRequest, ChatResponse

router = APIRouter(prefix="/api/plant", tags=["Chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat_with_plant(
    request: ChatRequest,
    store: PlantStateStore = Depends(get_store),
    companion: PlantCompanion = Depends(get_companion),
):
    """Send a message to the plant and get its reply."""
    record = store.snapshot()
    reply = await companion.reply_to(request.message, record)
    return ChatResponse(
        reply=reply.text,
        mood=record.current_mood,
        from_fallback=reply.from_fallback,
    )
