#!/usr/bin/env python3
"""
Seed a plant companion storage file with a demo mood history.

Writes a plant record with one mood log per day for the last N days, so
the insights view and streak have something to show during demos.

Usage:
    python scripts/seed_mood_history.py --days 14
    python scripts/seed_mood_history.py --output /tmp/plant.json --seed 7
"""
import argparse
import random
import sys
from datetime import date, timedelta
from pathlib import Path

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR / "src"))

from plant_companion import JsonFileStorage, Mood, MoodLog, PlantRecord  # noqa: E402
from plant_companion.plant_state import BASE_GROWTH, MOOD_SCORES, next_streak, streak_bonus  # noqa: E402

# Weighted towards good days so the demo plant looks healthy
MOOD_WEIGHTS = {
    Mood.HAPPY: 0.5,
    Mood.NEUTRAL: 0.35,
    Mood.SAD: 0.15,
}


def build_record(days: int, rng: random.Random, plant_name: str, today: date) -> PlantRecord:
    """
    Build a plant record with a mood log for each of the last `days` days.

    Args:
        days: Number of days of history to generate
        rng: Random source for picking moods
        plant_name: Name of the plant
        today: Last day of the history

    Returns:
        PlantRecord whose growth, grow count and streak come from replaying
        one grow per logged day
    """
    moods = list(MOOD_WEIGHTS)
    weights = list(MOOD_WEIGHTS.values())

    logs = []
    for offset in range(days, 0, -1):
        day = today - timedelta(days=offset)
        logs.append(MoodLog.for_mood(day, rng.choices(moods, weights=weights)[0]))

    # Replay one grow per day, starting from a fresh plant
    growth = 26
    streak = 0
    last_interaction = today - timedelta(days=days + 1)
    for log in logs:
        growth = min(100, int(growth + BASE_GROWTH[log.mood] + streak_bonus(streak)))
        streak = next_streak(streak, MOOD_SCORES[log.mood], last_interaction, log.date)
        last_interaction = log.date

    return PlantRecord(
        growth=growth,
        chat_count=7 + len(logs),
        streak=streak,
        current_mood=logs[-1].mood if logs else Mood.NEUTRAL,
        mood_logs=tuple(logs),
        plant_name=plant_name,
        last_interaction=logs[-1].date if logs else today,
    )


def main():
    """Write the seeded record to the storage file."""
    parser = argparse.ArgumentParser(description="Seed a demo plant mood history")
    parser.add_argument("--days", type=int, default=14, help="Days of history (default: 14)")
    parser.add_argument(
        "--output",
        type=Path,
        default=BASE_DIR / "plant_companion.json",
        help="Storage file to write (default: plant_companion.json in the project root)",
    )
    parser.add_argument("--plant-name", default="Little Sprout", help="Name of the plant")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data")
    args = parser.parse_args()

    if args.days < 0:
        parser.error("--days must not be negative")

    print("=" * 60)
    print("Plant Companion Mood History Seeder")
    print("=" * 60)

    record = build_record(args.days, random.Random(args.seed), args.plant_name, date.today())
    JsonFileStorage(args.output).save(record)

    counts = {mood: sum(1 for log in record.mood_logs if log.mood == mood) for mood in Mood}
    print(f"\nWrote {len(record.mood_logs)} mood logs to {args.output}")
    print(f"  Happy: {counts[Mood.HAPPY]}  Neutral: {counts[Mood.NEUTRAL]}  Sad: {counts[Mood.SAD]}")
    print(f"  Growth: {record.growth}%  Streak: {record.streak} days")


if __name__ == "__main__":
    main()
