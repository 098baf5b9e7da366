"""Pydantic request/response schemas for the dashboard API."""

from __future__ import annotations

import datetime as dt

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from aabot.configuration.schemas import ConfigurationUpdate, ConfigurationView, mask_secret


class _CamelModel(BaseModel):
    """Populated by attribute name, serialized in camelCase."""

    model_config = ConfigDict(
        alias_generator=AliasGenerator(serialization_alias=to_camel),
        from_attributes=True,
    )


class ConfigUpdateRequest(ConfigurationUpdate):
    """Body of PATCH/PUT /api/bot/config."""

    search_limit: int | None = Field(default=None, ge=1, le=50)


class ConfigResponse(_CamelModel):
    """Configuration as shown on the dashboard.

    Keys, tokens and the signing secret are masked; the salt is never sent.
    """

    id: str
    workspace_name: str
    apache_answer_api_url: str
    apache_answer_api_key: str
    slack_bot_token: str
    slack_app_token: str
    slack_channel_id: str
    slack_signing_secret: str
    search_limit: int
    enable_voting: bool
    has_encryption: bool = False
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


def config_to_response(view: ConfigurationView) -> ConfigResponse:
    return ConfigResponse(
        id=view.id,
        workspace_name=view.workspace_name,
        apache_answer_api_url=view.apache_answer_api_url,
        apache_answer_api_key=mask_secret(view.apache_answer_api_key),
        slack_bot_token=mask_secret(view.slack_bot_token),
        slack_app_token=mask_secret(view.slack_app_token),
        slack_channel_id=view.slack_channel_id,
        slack_signing_secret=mask_secret(view.slack_signing_secret),
        search_limit=view.search_limit,
        enable_voting=view.enable_voting,
        has_encryption=bool(view.encryption_salt),
        created_at=view.created_at,
        updated_at=view.updated_at,
    )


# --- Dashboard schemas ---


class AnalyticsResponse(_CamelModel):
    total_searches: int
    total_votes: int
    active_users: int
    searches_today: int
    api_calls: int


class SlackCommandEntry(_CamelModel):
    id: int
    command_name: str
    user_id: str
    user_name: str | None = None
    channel_id: str
    team_id: str | None = None
    query: str
    result_count: int
    response_time: int | None = None
    created_at: dt.datetime


class VersionInfo(BaseModel):
    name: str
    version: str
    description: str
