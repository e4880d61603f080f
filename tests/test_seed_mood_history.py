"""
Unit tests for the demo history seeding script.
"""
from datetime import timedelta
from unittest.mock import MagicMock

from plant_companion import Mood

from scripts.seed_mood_history import build_record

from conftest import TODAY


def _rng(*moods):
    rng = MagicMock()
    rng.choices.side_effect = [[mood] for mood in moods]
    return rng


class TestBuildRecord:
    """Test that seeded records match replaying one grow per day."""

    def test_streak_and_growth_follow_grow_rules(self):
        record = build_record(3, _rng(Mood.HAPPY, Mood.HAPPY, Mood.SAD), "Fern", TODAY)

        # 26 + 8, then + 8 + 0.5 bonus, then + 3 + 1.0 bonus
        assert record.growth == 46
        assert record.streak == 0
        assert record.chat_count == 10
        assert record.current_mood == Mood.SAD
        assert record.last_interaction == TODAY - timedelta(days=1)

    def test_neutral_day_holds_streak(self):
        record = build_record(3, _rng(Mood.HAPPY, Mood.HAPPY, Mood.NEUTRAL), "Fern", TODAY)

        assert record.streak == 2
        assert record.growth == 26 + 8 + 8 + 5 + 1

    def test_logs_cover_each_day_oldest_first(self):
        record = build_record(2, _rng(Mood.SAD, Mood.HAPPY), "Fern", TODAY)

        assert [(log.date, log.mood) for log in record.mood_logs] == [
            (TODAY - timedelta(days=2), Mood.SAD),
            (TODAY - timedelta(days=1), Mood.HAPPY),
        ]
        assert record.plant_name == "Fern"

    def test_no_history(self):
        record = build_record(0, _rng(), "Fern", TODAY)

        assert record.growth == 26
        assert record.streak == 0
        assert record.mood_logs == ()
        assert record.last_interaction == TODAY
