"""
Plant Companion chat.

Asks the configured text backend for the plant's reply and masks any
backend failure with a mood-appropriate fallback line, so the user always
gets a reply from the plant and never an error.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from .backends import ReplyBackend, ReplyBackendError
from .plant_state import Mood, PlantRecord

logger = logging.getLogger(__name__)

FALLBACK_REPLIES: Dict[Mood, List[str]] = {
    Mood.SAD: [
        "I'm here to listen. You're not alone in this. 🌱",
        "Even the strongest trees have tough days. You'll grow through this.",
        "Your feelings are valid. Let's take this one day at a time.",
    ],
    Mood.NEUTRAL: [
        "Thanks for sharing with me! How can I brighten your day?",
        "I'm grateful for your company. What's on your mind?",
        "Every conversation helps me understand you better.",
    ],
    Mood.HAPPY: [
        "Your joy makes my leaves dance! What's making you smile?",
        "I love seeing you happy! Your positive energy helps me grow!",
        "Your happiness is contagious! Tell me more about what's going well!",
    ],
}


@dataclass
class CompanionReply:
    """A reply from the plant."""

    text: str
    from_fallback: bool = False


class PlantCompanion:
    """Generates the plant's chat replies."""

    def __init__(
        self,
        backend: Optional[ReplyBackend] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the companion.

        Args:
            backend: Text backend, or None to always use fallbacks
            rng: Random source for picking fallback replies
        """
        self.backend = backend
        self.rng = rng or random.Random()

    def fallback_reply(self, mood: Mood) -> str:
        """Pick one of the pre-written replies for the mood."""
        return self.rng.choice(FALLBACK_REPLIES[Mood.parse(mood)])

    async def reply(
        self,
        user_text: str,
        mood: Mood,
        growth: int,
        streak: int,
        plant_name: str,
    ) -> CompanionReply:
        """
        Get the plant's reply to a user message.

        Args:
            user_text: What the user said
            mood: User's current mood
            growth: Plant growth level (0-100)
            streak: Current happy streak in days
            plant_name: Name the plant answers as

        Returns:
            CompanionReply; from_fallback is True when the backend failed
        """
        mood = Mood.parse(mood)
        if self.backend is None:
            return CompanionReply(text=self.fallback_reply(mood), from_fallback=True)

        try:
            text = await self.backend.generate_reply(user_text, mood, growth, streak, plant_name)
            return CompanionReply(text=text)
        except ReplyBackendError as e:
            fallback = self.fallback_reply(mood)
            logger.warning(f"[COMPANION] {self.backend.name} backend failed ({e}), using fallback reply")
            return CompanionReply(text=fallback, from_fallback=True)

    async def reply_to(self, user_text: str, record: PlantRecord) -> CompanionReply:
        """Reply using the mood, growth, streak and name from a plant record."""
        return await self.reply(
            user_text,
            mood=record.current_mood,
            growth=record.growth,
            streak=record.streak,
            plant_name=record.plant_name,
        )
