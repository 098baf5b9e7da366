"""Tests for the slash-command log and analytics."""

import datetime as dt

import pytest

from aabot.interactions.service import (
    compute_analytics,
    list_slack_commands,
    log_slack_question,
)
from aabot.models.slack_command import SlackCommand


@pytest.mark.asyncio
async def test_log_slack_question(test_session_factory):
    async with test_session_factory() as session:
        command = await log_slack_question(
            session,
            user_id="U1",
            query="how do I deploy",
            channel_id="C1",
            result_count=4,
            response_time_ms=250,
        )

    assert command.id is not None
    assert command.command_name == "/aabot-search"
    assert command.created_at is not None

    async with test_session_factory() as session:
        commands = await list_slack_commands(session)
    assert [c.query for c in commands] == ["how do I deploy"]
    assert commands[0].result_count == 4


@pytest.mark.asyncio
async def test_list_most_recent_first(test_session_factory):
    async with test_session_factory() as session:
        for i in range(5):
            await log_slack_question(session, user_id="U1", query=f"q{i}", channel_id="C1")

        commands = await list_slack_commands(session, limit=3)

    assert [c.query for c in commands] == ["q4", "q3", "q2"]


@pytest.mark.asyncio
async def test_analytics_counts_today_only_for_searches_today(test_session_factory):
    yesterday = dt.datetime.now(dt.UTC).replace(tzinfo=None) - dt.timedelta(days=1, hours=1)
    async with test_session_factory() as session:
        session.add(
            SlackCommand(
                command_name="/aabot-search",
                user_id="U9",
                channel_id="C1",
                query="old question",
                created_at=yesterday,
            )
        )
        await session.commit()
        await log_slack_question(session, user_id="U1", query="new", channel_id="C1")
        await log_slack_question(session, user_id="U1", query="newer", channel_id="C1")

        analytics = await compute_analytics(session)

    assert analytics.total_searches == 3
    assert analytics.searches_today == 2
    assert analytics.active_users == 2
    assert analytics.total_votes == 0
    assert analytics.api_calls == 3
