"""Application-facing shapes of the bot configuration."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Stored encrypted; everything else on the record is stored as-is.
SENSITIVE_FIELDS = (
    "apache_answer_api_url",
    "apache_answer_api_key",
    "slack_bot_token",
    "slack_app_token",
    "slack_channel_id",
    "slack_signing_secret",
)


class ConfigurationUpdate(BaseModel):
    """A partial configuration change.

    Omitted fields (and fields sent as ``null``) are left untouched; an empty
    string clears a sensitive field.  Values are assumed validated by the
    caller.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    workspace_name: str | None = None
    apache_answer_api_url: str | None = None
    apache_answer_api_key: str | None = None
    slack_bot_token: str | None = None
    slack_app_token: str | None = None
    slack_channel_id: str | None = None
    slack_signing_secret: str | None = None
    search_limit: int | None = None
    enable_voting: bool | None = None

    def present_fields(self) -> dict:
        """Fields supplied by the caller, keyed by attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ConfigurationView(BaseModel):
    """The decrypted configuration record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    workspace_name: str
    apache_answer_api_url: str = ""
    apache_answer_api_key: str = ""
    slack_bot_token: str = ""
    slack_app_token: str = ""
    slack_channel_id: str = ""
    slack_signing_secret: str = ""
    search_limit: int = 10
    enable_voting: bool = True
    encryption_salt: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


def mask_secret(value: str | None) -> str:
    """Render a secret for display: first and last four characters only."""
    if not value:
        return "not set"
    if len(value) <= 8:
        return "****"
    return f"{value[:4]}****{value[-4:]}"
