"""
Plant State Module.

Owns the single persisted plant record: growth level, grow count, happy
streak, current mood and the per-day mood log. All mutations go through
PlantStateStore, which swaps in a fully built replacement record and
writes it back through the injected storage port.
"""

import logging
import threading
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from .storage import PlantStorage, StorageError

logger = logging.getLogger(__name__)

DEFAULT_PLANT_NAME = "Little Sprout"

# Growth and streak tuning
GROWTH_MIN = 0
GROWTH_MAX = 100
STREAK_BONUS_PER_DAY = 0.5
STREAK_BONUS_CAP = 5.0
HAPPY_SCORE_THRESHOLD = 60
NEUTRAL_SCORE_THRESHOLD = 45


class Mood(str, Enum):
    """Self-reported mood of the user."""

    SAD = "sad"
    NEUTRAL = "neutral"
    HAPPY = "happy"

    @classmethod
    def parse(cls, value: Any) -> "Mood":
        """
        Convert a raw value to a Mood.

        Raises:
            ValueError: if the value is not one of sad, neutral, happy
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Invalid mood {value!r}. Must be one of: {[m.value for m in cls]}"
            ) from None


MOOD_SCORES: Dict[Mood, int] = {
    Mood.SAD: 25,
    Mood.NEUTRAL: 50,
    Mood.HAPPY: 85,
}

BASE_GROWTH: Dict[Mood, int] = {
    Mood.SAD: 3,
    Mood.NEUTRAL: 5,
    Mood.HAPPY: 8,
}


def mood_score(mood: Mood) -> int:
    """Fixed score for a mood (sad=25, neutral=50, happy=85)."""
    return MOOD_SCORES[Mood.parse(mood)]


@dataclass(frozen=True)
class MoodLog:
    """Mood registered for one calendar day."""

    date: date
    mood: Mood
    mood_score: int

    @classmethod
    def for_mood(cls, day: date, mood: Mood) -> "MoodLog":
        return cls(date=day, mood=mood, mood_score=mood_score(mood))

    def to_dict(self) -> dict:
        """Convert to the persisted JSON shape."""
        return {
            "date": self.date.isoformat(),
            "mood": self.mood.value,
            "moodScore": self.mood_score,
        }


@dataclass(frozen=True)
class PlantRecord:
    """The persisted plant aggregate. Never mutated in place."""

    growth: int = 26
    chat_count: int = 7
    streak: int = 0
    current_mood: Mood = Mood.NEUTRAL
    mood_logs: Tuple[MoodLog, ...] = ()
    plant_name: str = DEFAULT_PLANT_NAME
    last_interaction: date = field(default_factory=date.today)

    def to_dict(self) -> dict:
        """Convert to the persisted JSON shape (camelCase keys, ISO dates)."""
        return {
            "growth": self.growth,
            "chatCount": self.chat_count,
            "streak": self.streak,
            "currentMood": self.current_mood.value,
            "moodLogs": [log.to_dict() for log in self.mood_logs],
            "plantName": self.plant_name,
            "lastInteraction": self.last_interaction.isoformat(),
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        today: date,
        plant_name: str = DEFAULT_PLANT_NAME,
    ) -> "PlantRecord":
        """
        Build a record from stored state, backfilling missing fields.

        Fields that are absent or unreadable take the documented defaults,
        so records written by older versions keep loading.

        Args:
            data: Stored (possibly partial) record
            today: Date used as the default last interaction
            plant_name: Name used when the stored record has none
        """
        defaults = cls(plant_name=plant_name, last_interaction=today)

        growth = _read_int(data, "growth", defaults.growth)
        chat_count = _read_int(data, "chatCount", defaults.chat_count)
        streak = _read_int(data, "streak", defaults.streak)

        try:
            current_mood = Mood.parse(data.get("currentMood", defaults.current_mood))
        except ValueError:
            logger.warning(
                f"[STORE] Ignoring stored mood {data.get('currentMood')!r}, "
                f"using {defaults.current_mood.value}"
            )
            current_mood = defaults.current_mood

        try:
            last_interaction = date.fromisoformat(data["lastInteraction"])
        except (KeyError, TypeError, ValueError):
            last_interaction = defaults.last_interaction

        name = data.get("plantName")
        if not isinstance(name, str) or not name.strip():
            name = defaults.plant_name

        return cls(
            growth=min(GROWTH_MAX, max(GROWTH_MIN, growth)),
            chat_count=max(0, chat_count),
            streak=max(0, streak),
            current_mood=current_mood,
            mood_logs=_read_mood_logs(data.get("moodLogs")),
            plant_name=name,
            last_interaction=last_interaction,
        )


def _read_int(data: Dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"[STORE] Ignoring stored {key}={value!r}, using {default}")
        return default


def _read_mood_logs(raw_logs: Any) -> Tuple[MoodLog, ...]:
    """Parse stored logs, dropping unreadable entries and keeping the last log per date."""
    if raw_logs is None:
        return ()
    if not isinstance(raw_logs, list):
        logger.warning(f"[STORE] Ignoring stored moodLogs={raw_logs!r}, expected a list")
        return ()
    by_date: Dict[date, MoodLog] = {}
    for raw in raw_logs:
        try:
            day = date.fromisoformat(raw["date"])
            mood = Mood.parse(raw["mood"])
        except (KeyError, TypeError, ValueError):
            logger.warning(f"[STORE] Skipping unreadable mood log: {raw!r}")
            continue
        by_date.pop(day, None)
        by_date[day] = MoodLog.for_mood(day, mood)
    return tuple(by_date.values())


def upsert_mood_log(logs: Tuple[MoodLog, ...], entry: MoodLog) -> Tuple[MoodLog, ...]:
    """Replace any log for the entry's date and append the entry (last write wins)."""
    return tuple(log for log in logs if log.date != entry.date) + (entry,)


def streak_bonus(streak: int) -> float:
    """Extra growth earned from the current streak, capped."""
    return min(streak * STREAK_BONUS_PER_DAY, STREAK_BONUS_CAP)


def next_streak(
    streak: int,
    score: int,
    last_interaction: date,
    today: date,
) -> int:
    """
    Advance the happy streak for a new day.

    Happy-band scores continue the streak when the last grow was
    yesterday and restart it at 1 otherwise. Neutral-band scores hold the
    streak after a grow yesterday and decay it by one after a gap.
    Sad-band scores decay it by two.
    """
    yesterday = today - timedelta(days=1)
    day_before_yesterday = today - timedelta(days=2)

    if score >= HAPPY_SCORE_THRESHOLD:
        if last_interaction == yesterday:
            return streak + 1
        elif last_interaction == day_before_yesterday:
            # One missed day is not forgiven: the streak restarts
            return 1
        return 1
    elif score >= NEUTRAL_SCORE_THRESHOLD:
        if last_interaction == yesterday:
            return streak
        return max(0, streak - 1)
    return max(0, streak - 2)


def grow_message(mood: Mood, streak: int) -> str:
    """Notification text for a grow, banded by mood and streak length."""
    if mood == Mood.HAPPY:
        if streak >= 3:
            return f"Your happiness makes me grow so strong! {streak} happy days in a row! 🌱✨"
        return "Your happiness makes me grow so strong! 🌱✨"
    elif mood == Mood.NEUTRAL:
        if streak > 0:
            return f"Thank you for taking care of me today! Our {streak}-day streak is holding steady. 🌿"
        return "Thank you for taking care of me today! 🌿"
    if streak > 0:
        return "I'm here for you, even on tough days. Our roots are still strong. 💚"
    return "I'm here for you, even on tough days. We'll grow together. 💚"


ALREADY_GROWN_MESSAGE = "We've already grown together today. Come back tomorrow! 🌱"


@dataclass
class GrowResult:
    """Outcome of a grow action, used only for the user-facing notification."""

    grew: bool
    growth_increment: float
    new_streak: int
    message: str
    streak_bonus: Optional[str] = None


class PlantStateStore:
    """
    Holds the plant record for the session and persists every mutation.

    The record is loaded once from storage (or created from defaults) and
    the in-memory copy stays authoritative: a failed write is logged and
    retried on the next mutation or an explicit flush().

    Grows are limited to one per calendar day. A repeated grow on the
    same day only refreshes today's mood log.
    """

    def __init__(
        self,
        storage: PlantStorage,
        clock: Callable[[], date] = date.today,
        plant_name: str = DEFAULT_PLANT_NAME,
    ):
        """
        Initialize the store.

        Args:
            storage: Persistence port with load() and save(record)
            clock: Returns the current calendar date
            plant_name: Name given to a newly created plant
        """
        self._storage = storage
        self._clock = clock
        self._lock = threading.Lock()
        self._dirty = False
        self._record = self._load(plant_name)

    def _load(self, plant_name: str) -> PlantRecord:
        today = self._clock()
        try:
            stored = self._storage.load()
        except StorageError as e:
            logger.error(f"[STORE] Could not load plant record, starting fresh: {e}")
            stored = None

        if stored is None:
            record = PlantRecord(plant_name=plant_name, last_interaction=today)
            logger.info(f"[STORE] Created new plant '{record.plant_name}'")
            self._persist(record)
            return record

        record = PlantRecord.from_dict(stored, today=today, plant_name=plant_name)
        logger.info(
            f"[STORE] Loaded plant '{record.plant_name}': growth={record.growth}, "
            f"streak={record.streak}, logs={len(record.mood_logs)}"
        )
        return record

    @property
    def record(self) -> PlantRecord:
        """Current record. Records are immutable, so this is a safe snapshot."""
        return self._record

    def snapshot(self) -> PlantRecord:
        """Return the current record, taken under the lock so no update is half-applied."""
        with self._lock:
            return self._record

    @property
    def dirty(self) -> bool:
        """True while the latest record has not been written successfully."""
        return self._dirty

    def today(self) -> date:
        return self._clock()

    def set_mood(self, mood: Mood) -> PlantRecord:
        """
        Replace the current mood. No other field changes.

        Raises:
            ValueError: if mood is not a valid Mood value
        """
        mood = Mood.parse(mood)
        with self._lock:
            record = replace(self._record, current_mood=mood)
            self._record = record
            self._persist(record)
        logger.debug(f"[STORE] Mood set to {mood.value}")
        return record

    def grow(self) -> GrowResult:
        """
        Grow the plant for today.

        The first grow of a calendar day adds base growth for the current
        mood plus the streak bonus, advances the streak, bumps the grow
        count and records today's mood. Later grows on the same day only
        refresh today's mood log.
        """
        with self._lock:
            current = self._record
            today = self._clock()
            mood = current.current_mood
            score = mood_score(mood)
            log_entry = MoodLog(date=today, mood=mood, mood_score=score)

            if current.last_interaction == today:
                record = replace(
                    current, mood_logs=upsert_mood_log(current.mood_logs, log_entry)
                )
                self._record = record
                self._persist(record)
                logger.info(f"[STORE] Already grown today ({today}), mood log refreshed")
                return GrowResult(
                    grew=False,
                    growth_increment=0,
                    new_streak=current.streak,
                    message=ALREADY_GROWN_MESSAGE,
                )

            bonus = streak_bonus(current.streak)
            increment = BASE_GROWTH[mood] + bonus
            new_streak = next_streak(current.streak, score, current.last_interaction, today)

            record = replace(
                current,
                growth=min(GROWTH_MAX, int(current.growth + increment)),
                chat_count=current.chat_count + 1,
                streak=new_streak,
                mood_logs=upsert_mood_log(current.mood_logs, log_entry),
                last_interaction=today,
            )
            self._record = record
            self._persist(record)

        logger.info(
            f"[STORE] Grew {current.growth} -> {record.growth} (+{increment:g}), "
            f"streak {current.streak} -> {new_streak}, mood={mood.value}"
        )
        return GrowResult(
            grew=True,
            growth_increment=increment,
            new_streak=new_streak,
            message=grow_message(mood, new_streak),
            streak_bonus=f"+{bonus:.1f} streak bonus" if bonus > 0 else None,
        )

    def flush(self) -> bool:
        """
        Retry writing the current record if the last write failed.

        Returns:
            True if the stored record is up to date
        """
        with self._lock:
            if self._dirty:
                self._persist(self._record)
            return not self._dirty

    def _persist(self, record: PlantRecord) -> None:
        try:
            self._storage.save(record)
        except StorageError as e:
            self._dirty = True
            logger.error(f"[STORE] Failed to persist plant record (kept in memory): {e}")
        else:
            self._dirty = False
