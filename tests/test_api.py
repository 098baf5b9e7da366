"""Tests for health, version and dashboard endpoints."""

import pytest

from aabot import __version__
from aabot.interactions.service import log_slack_question


@pytest.mark.asyncio
async def test_health_endpoint(api_client):
    resp = await api_client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_health_db_endpoint(api_client):
    resp = await api_client.get("/health/db")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_version_endpoint(api_client):
    resp = await api_client.get("/api/version")
    assert resp.status_code == 200
    assert resp.json()["name"] == "AABot"
    assert resp.json()["version"] == __version__


@pytest.mark.asyncio
async def test_analytics_empty(api_client):
    resp = await api_client.get("/api/bot/analytics")
    assert resp.status_code == 200
    assert resp.json() == {
        "totalSearches": 0,
        "totalVotes": 0,
        "activeUsers": 0,
        "searchesToday": 0,
        "apiCalls": 0,
    }


@pytest.mark.asyncio
async def test_commands_and_analytics(api_client, test_session_factory):
    async with test_session_factory() as session:
        for user, query in [("U1", "how to install"), ("U2", "reset password"), ("U1", "api key")]:
            await log_slack_question(
                session,
                user_id=user,
                user_name=f"user-{user}",
                query=query,
                channel_id="C1",
                team_id="T1",
                result_count=3,
                response_time_ms=120,
            )

    resp = await api_client.get("/api/commands?limit=2")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 2
    assert data[0]["query"] == "api key"
    assert data[0]["commandName"] == "/aabot-search"
    assert data[0]["responseTime"] == 120

    analytics = (await api_client.get("/api/bot/analytics")).json()
    assert analytics["totalSearches"] == 3
    assert analytics["activeUsers"] == 2
    assert analytics["searchesToday"] == 3
    assert analytics["apiCalls"] == 3


@pytest.mark.asyncio
async def test_commands_limit_validated(api_client):
    resp = await api_client.get("/api/commands?limit=0")
    assert resp.status_code == 422
