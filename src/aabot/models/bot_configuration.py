"""SQLAlchemy model for the singleton bot configuration."""

from __future__ import annotations

import uuid
from datetime import datetime

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from aabot.models.base import Base, utcnow


def _new_id() -> str:
    return str(uuid.uuid4())


class BotConfiguration(Base):
    """The one live configuration row.

    Columns suffixed ``_encrypted`` hold AES-GCM tokens produced under
    ``encryption_salt``.  A row without a salt predates encryption and its
    sensitive columns hold plain text.
    """

    __tablename__ = "bot_configurations"

    id: Mapped[str] = mapped_column(sa.String(36), primary_key=True, default=_new_id)
    workspace_name: Mapped[str] = mapped_column(sa.Text)

    apache_answer_api_url: Mapped[str | None] = mapped_column(
        "apache_answer_api_url_encrypted", sa.Text, nullable=True
    )
    apache_answer_api_key: Mapped[str | None] = mapped_column(
        "apache_answer_api_key_encrypted", sa.Text, nullable=True
    )
    slack_bot_token: Mapped[str | None] = mapped_column(
        "slack_bot_token_encrypted", sa.Text, nullable=True
    )
    slack_app_token: Mapped[str | None] = mapped_column(
        "slack_app_token_encrypted", sa.Text, nullable=True
    )
    slack_channel_id: Mapped[str | None] = mapped_column(
        "slack_channel_id_encrypted", sa.Text, nullable=True
    )
    slack_signing_secret: Mapped[str | None] = mapped_column(
        "slack_signing_secret_encrypted", sa.Text, nullable=True
    )

    search_limit: Mapped[int] = mapped_column(sa.Integer, default=10, server_default="10")
    enable_voting: Mapped[bool] = mapped_column(
        sa.Boolean, default=True, server_default=sa.true()
    )

    encryption_salt: Mapped[str | None] = mapped_column(sa.Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime, default=utcnow, server_default=sa.text("CURRENT_TIMESTAMP")
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime, default=utcnow, server_default=sa.text("CURRENT_TIMESTAMP")
    )
