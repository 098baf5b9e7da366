"""Slash-command log and the analytics derived from it."""

from __future__ import annotations

from dataclasses import dataclass

import sqlalchemy as sa
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from aabot.models.base import utcnow
from aabot.models.slack_command import SlackCommand

logger = structlog.get_logger()

DEFAULT_COMMAND_NAME = "/aabot-search"


@dataclass
class BotAnalytics:
    total_searches: int
    total_votes: int
    active_users: int
    searches_today: int
    api_calls: int


async def log_slack_question(
    session: AsyncSession,
    *,
    user_id: str,
    query: str,
    channel_id: str,
    user_name: str | None = None,
    team_id: str | None = None,
    result_count: int = 0,
    response_time_ms: int | None = None,
    command_name: str = DEFAULT_COMMAND_NAME,
) -> SlackCommand:
    """Record one answered slash command."""
    command = SlackCommand(
        command_name=command_name,
        user_id=user_id,
        user_name=user_name,
        channel_id=channel_id,
        team_id=team_id,
        query=query,
        result_count=result_count,
        response_time=response_time_ms,
    )
    session.add(command)
    await session.commit()
    logger.info(
        "slack_question_logged",
        command=command_name,
        channel_id=channel_id,
        result_count=result_count,
        response_time_ms=response_time_ms,
    )
    return command


async def list_slack_commands(session: AsyncSession, limit: int = 50) -> list[SlackCommand]:
    """Most recent commands first."""
    stmt = (
        sa.select(SlackCommand)
        .order_by(SlackCommand.created_at.desc(), SlackCommand.id.desc())
        .limit(limit)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def compute_analytics(session: AsyncSession) -> BotAnalytics:
    """Aggregate the command log.

    Votes are not logged, so ``total_votes`` is always zero.
    """
    midnight = utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
    stmt = sa.select(
        sa.func.count(SlackCommand.id).label("total"),
        sa.func.count(sa.distinct(SlackCommand.user_id)).label("users"),
        sa.func.count(sa.case((SlackCommand.created_at >= midnight, 1))).label("today"),
    )
    result = await session.execute(stmt)
    row = result.one()

    return BotAnalytics(
        total_searches=row.total,
        total_votes=0,
        active_users=row.users,
        searches_today=row.today,
        api_calls=row.total,
    )
