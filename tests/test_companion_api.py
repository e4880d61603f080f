"""
Integration tests for the Plant Companion API routes.

Runs the FastAPI app in-process with an in-memory store, a fixed clock
and a companion without a live text backend.

Usage:
    pytest tests/test_companion_api.py -v
"""
import random
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from plant_companion import DailyBoost, InMemoryStorage, PlantCompanion, PlantStateStore
from plant_companion.companion import FALLBACK_REPLIES
from plant_companion.daily_boost import THOUGHTS
from plant_companion import Mood

from server.companion_api.main import app
from server.companion_api.dependencies import get_companion, get_daily_boost, get_store

from conftest import FakeClock, TODAY, days_ago, record_dict


@pytest.fixture
def api_clock():
    return FakeClock()


@pytest.fixture
def api_store(api_clock):
    storage = InMemoryStorage(record_dict(lastInteraction=days_ago(1)))
    return PlantStateStore(storage, clock=api_clock)


@pytest_asyncio.fixture
async def client(api_store, api_clock):
    """httpx async test client with in-memory dependencies"""
    companion = PlantCompanion(backend=None, rng=random.Random(3))
    boost = DailyBoost(rng=random.Random(3), clock=api_clock)

    app.dependency_overrides[get_store] = lambda: api_store
    app.dependency_overrides[get_companion] = lambda: companion
    app.dependency_overrides[get_daily_boost] = lambda: boost

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "plant-companion-api"}


class TestPlantRoutes:
    """Test plant state endpoints."""

    @pytest.mark.asyncio
    async def test_get_plant(self, client):
        response = await client.get("/api/plant")

        assert response.status_code == 200
        assert response.json() == {
            "growth": 26,
            "chatCount": 7,
            "streak": 0,
            "currentMood": "neutral",
            "plantName": "Little Sprout",
            "lastInteraction": days_ago(1),
            "growthStage": "seedling",
        }

    @pytest.mark.asyncio
    async def test_update_mood(self, client, api_store):
        response = await client.post("/api/plant/mood", json={"mood": "happy"})

        assert response.status_code == 200
        data = response.json()
        assert data["mood"] == "happy"
        assert data["notification"] == "You're feeling happy today. Your plant understands! 🌱"
        assert data["plant"]["currentMood"] == "happy"
        assert api_store.record.current_mood == Mood.HAPPY

    @pytest.mark.asyncio
    async def test_invalid_mood_rejected(self, client, api_store):
        response = await client.post("/api/plant/mood", json={"mood": "ecstatic"})

        assert response.status_code == 422
        assert api_store.record.current_mood == Mood.NEUTRAL

    @pytest.mark.asyncio
    async def test_grow(self, client):
        await client.post("/api/plant/mood", json={"mood": "happy"})
        response = await client.post("/api/plant/grow")

        assert response.status_code == 200
        data = response.json()
        assert data["grew"] is True
        assert data["growthIncrement"] == 8
        assert data["newStreak"] == 1
        assert data["streakBonus"] is None
        assert "happiness" in data["message"]
        assert data["plant"]["growth"] == 34
        assert data["plant"]["chatCount"] == 8
        assert data["plant"]["lastInteraction"] == TODAY.isoformat()

    @pytest.mark.asyncio
    async def test_second_grow_same_day(self, client):
        await client.post("/api/plant/grow")
        response = await client.post("/api/plant/grow")

        data = response.json()
        assert data["grew"] is False
        assert data["growthIncrement"] == 0
        assert data["plant"]["growth"] == 31
        assert data["plant"]["chatCount"] == 8


class TestInsightRoutes:
    """Test history and insight endpoints."""

    @pytest.mark.asyncio
    async def test_insights_for_new_plant(self, client):
        response = await client.get("/api/plant/insights")

        assert response.status_code == 200
        assert response.json() == {
            "weeklyHappyDays": 0,
            "averageWeeklyMood": 50.0,
            "weeklyMoodLabel": "Growing",
            "totalInteractions": 7,
            "currentStreak": 0,
            "growthLevel": 26,
            "nextMilestone": {"icon": "🌿", "label": "50% - Steady Growth"},
        }

    @pytest.mark.asyncio
    async def test_history_after_grow(self, client):
        await client.post("/api/plant/mood", json={"mood": "happy"})
        await client.post("/api/plant/grow")

        response = await client.get("/api/plant/history", params={"days": 7})

        assert response.status_code == 200
        assert response.json() == [{"date": TODAY.isoformat(), "mood": "happy", "moodScore": 85}]

        insights = (await client.get("/api/plant/insights")).json()
        assert insights["weeklyHappyDays"] == 1
        assert insights["averageWeeklyMood"] == 85.0
        assert insights["weeklyMoodLabel"] == "Thriving"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("days", [0, 366])
    async def test_history_days_validated(self, client, days):
        response = await client.get("/api/plant/history", params={"days": days})
        assert response.status_code == 422


class TestChatRoutes:
    """Test the chat endpoint."""

    @pytest.mark.asyncio
    async def test_chat_falls_back_without_backend(self, client):
        response = await client.post("/api/plant/chat", json={"message": "Hello plant"})

        assert response.status_code == 200
        data = response.json()
        assert data["fromFallback"] is True
        assert data["mood"] == "neutral"
        assert data["reply"] in FALLBACK_REPLIES[Mood.NEUTRAL]

    @pytest.mark.asyncio
    async def test_blank_message_rejected(self, client):
        response = await client.post("/api/plant/chat", json={"message": "   "})
        assert response.status_code == 422


class TestDailyBoostRoutes:
    """Test the Daily Boost endpoints."""

    @pytest.mark.asyncio
    async def test_daily_boost_cached(self, client):
        first = (await client.get("/api/plant/daily-boost")).json()
        second = (await client.get("/api/plant/daily-boost")).json()

        assert first == second
        assert first["date"] == TODAY.isoformat()
        assert first["thought"] in THOUGHTS[Mood.NEUTRAL]

    @pytest.mark.asyncio
    async def test_daily_boost_follows_mood(self, client):
        await client.post("/api/plant/mood", json={"mood": "sad"})
        data = (await client.get("/api/plant/daily-boost")).json()

        assert data["mood"] == "sad"
        assert data["thought"] in THOUGHTS[Mood.SAD]

    @pytest.mark.asyncio
    async def test_refresh(self, client):
        response = await client.post("/api/plant/daily-boost/refresh")

        assert response.status_code == 200
        assert set(response.json()) == {"date", "mood", "joke", "thought", "tip"}
