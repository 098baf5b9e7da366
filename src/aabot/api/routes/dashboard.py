"""API routes for the dashboard: analytics and recent slash commands."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from aabot.api.deps import get_db
from aabot.api.schemas import AnalyticsResponse, SlackCommandEntry
from aabot.interactions.service import compute_analytics, list_slack_commands

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/bot/analytics", response_model=AnalyticsResponse)
async def bot_analytics(db: AsyncSession = Depends(get_db)) -> AnalyticsResponse:
    analytics = await compute_analytics(db)
    return AnalyticsResponse(**asdict(analytics))


@router.get("/commands", response_model=list[SlackCommandEntry])
async def recent_commands(
    db: AsyncSession = Depends(get_db),
    limit: int = Query(default=10, ge=1, le=100),
) -> list[SlackCommandEntry]:
    """Most recent slash commands first."""
    commands = await list_slack_commands(db, limit=limit)
    return [SlackCommandEntry.model_validate(command) for command in commands]
