"""Mood history and insight API routes."""
from fastapi import APIRouter, Depends, Query

from plant_companion import InsightAggregator, describe_weekly_mood, next_milestone

from ..dependencies import get_insights
from ..models.insights import MoodLogEntry, Milestone, InsightsSummary

router = APIRouter(prefix="/api/plant", tags=["Insights"])


@router.get("/history", response_model=list[MoodLogEntry])
async def get_mood_history(
    days: int = Query(default=30, ge=1, le=365, description="Number of days of history"),
    aggregator: InsightAggregator = Depends(get_insights),
):
    """Get logged moods for the specified number of days, oldest first."""
    return [MoodLogEntry.model_validate(log) for log in aggregator.mood_history(days)]


@router.get("/insights", response_model=InsightsSummary)
async def get_insights_summary(aggregator: InsightAggregator = Depends(get_insights)):
    """Get weekly mood statistics together with growth and streak."""
    insights = aggregator.insights()
    milestone = next_milestone(insights.growth_level)
    return InsightsSummary(
        weekly_happy_days=insights.weekly_happy_days,
        average_weekly_mood=insights.average_weekly_mood,
        weekly_mood_label=describe_weekly_mood(insights.average_weekly_mood),
        total_interactions=insights.total_interactions,
        current_streak=insights.current_streak,
        growth_level=insights.growth_level,
        next_milestone=Milestone(icon=milestone.icon, label=milestone.label),
    )
