"""
Daily Boost content: a joke, a mood-matched motivational thought and a
growth tip, picked once per day and cached until the day or mood changes.
"""

import logging
import random
from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from .backends import ReplyBackend, ReplyBackendError
from .plant_state import Mood

logger = logging.getLogger(__name__)

JOKES = [
    "Why don't scientists trust atoms? Because they make up everything! 😄",
    "What do you call a fake noodle? An impasta! 🍝",
    "Why did the scarecrow win an award? He was outstanding in his field! 🌾",
    "What do you call a dinosaur that crashes his car? Tyrannosaurus Wrecks! 🦕",
    "Why don't eggs tell jokes? They'd crack each other up! 🥚",
    "What's the best thing about Switzerland? I don't know, but the flag is a big plus! 🇨🇭",
    "Why did the math book look so sad? Because it was full of problems! 📚",
    "What do you call a bear with no teeth? A gummy bear! 🐻",
    "Why don't skeletons fight each other? They don't have the guts! 💀",
    "What do you call a sleeping bull? A bulldozer! 🐂",
]

THOUGHTS: Dict[Mood, List[str]] = {
    Mood.SAD: [
        "Every storm runs out of rain. You're stronger than you know. 💙",
        "It's okay to not be okay sometimes. Tomorrow is a new day. 🌅",
        "You've survived 100% of your worst days so far. That's a pretty good track record. 💪",
        "Healing isn't linear, and that's perfectly okay. Take it one step at a time. 🌱",
        "Your feelings are valid. Be gentle with yourself today. 🤗",
    ],
    Mood.NEUTRAL: [
        "Small steps are still progress. You're moving forward. 🚶‍♀️",
        "Today is a blank canvas. What will you create? 🎨",
        "Progress, not perfection. Every day is a chance to grow. 📈",
        "You don't have to be extraordinary to be worthy of love and respect. ✨",
        "Sometimes the most productive thing you can do is rest. 😌",
    ],
    Mood.HAPPY: [
        "Your happiness is contagious! Keep spreading those good vibes. ☀️",
        "You're blooming beautifully. Keep shining your light! 🌟",
        "Celebrate the small wins - they add up to big victories! 🎉",
        "Your positive energy is making the world a brighter place. 🌈",
        "You're proof that good things do happen. Keep being amazing! 🦋",
    ],
}

GROWTH_TIPS = [
    "Like plants need both sunshine and rain, give yourself permission to feel all emotions - they're all part of your growth. ☀️🌧️",
    "Just as plants turn toward the light, try starting each day by focusing on one thing you're grateful for. 🌅",
    "Plants thrive with consistent care, not perfection - aim for small, daily acts of self-kindness rather than grand gestures. 💚",
    "Like roots that grow stronger in rich soil, nourish your mind with positive influences and supportive relationships. 🌿",
    "Even plants need pruning to grow better - it's okay to let go of habits or thoughts that no longer serve you. ✂️",
]

JOKE_PROMPT = (
    "Generate a short, wholesome, plant-themed joke that would make someone smile. "
    "Keep it light, punny, and nature-related. Just return the joke, nothing else."
)
THOUGHT_PROMPT = (
    "Generate an inspiring, motivational thought about personal growth, resilience, or "
    "mental health for someone who is feeling {mood}. Use nature metaphors and keep it "
    "uplifting and meaningful. 1-2 sentences max."
)
TIP_PROMPT = (
    "Generate a practical, actionable tip for mental health and personal growth. Make it "
    "simple, doable, and inspiring. Use plant/nature analogies. Keep it to 1-2 sentences."
)


@dataclass
class BoostContent:
    """One day's Daily Boost."""

    day: date
    mood: Mood
    joke: str
    thought: str
    tip: str

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "mood": self.mood.value,
            "joke": self.joke,
            "thought": self.thought,
            "tip": self.tip,
        }


class DailyBoost:
    """
    Picks and caches the Daily Boost.

    Content is chosen from the built-in lists, or asked of the text
    backend when one is configured, with the lists as fallback.
    """

    def __init__(
        self,
        backend: Optional[ReplyBackend] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.backend = backend
        self.rng = rng or random.Random()
        self._clock = clock
        self._cache_key: Optional[Tuple[date, Mood]] = None
        self._content: Optional[BoostContent] = None

    async def today(self, mood: Mood) -> BoostContent:
        """Get today's content, picking new content on a new day or mood."""
        mood = Mood.parse(mood)
        key = (self._clock(), mood)
        if self._content is None or self._cache_key != key:
            await self._pick(mood)
        return self._content

    async def refresh(self, mood: Mood) -> BoostContent:
        """Pick new content regardless of the cache."""
        await self._pick(Mood.parse(mood))
        return self._content

    async def _pick(self, mood: Mood) -> None:
        day = self._clock()
        self._content = BoostContent(
            day=day,
            mood=mood,
            joke=await self._generate(JOKE_PROMPT, JOKES),
            thought=await self._generate(THOUGHT_PROMPT.format(mood=mood.value), THOUGHTS[mood]),
            tip=await self._generate(TIP_PROMPT, GROWTH_TIPS),
        )
        self._cache_key = (day, mood)
        logger.info(f"[BOOST] Picked daily boost for {day} ({mood.value})")

    async def _generate(self, prompt: str, fallbacks: List[str]) -> str:
        if self.backend is not None:
            try:
                return await self.backend.generate_text(prompt)
            except ReplyBackendError as e:
                logger.warning(f"[BOOST] {self.backend.name} backend failed ({e}), using built-in content")
        return self.rng.choice(fallbacks)
