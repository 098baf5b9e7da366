"""Slash-command interaction log shown on the dashboard."""

from __future__ import annotations

import datetime as dt

import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from aabot.models.base import Base, utcnow


class SlackCommand(Base):
    __tablename__ = "slack_commands"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    command_name: Mapped[str] = mapped_column(sa.Text)
    user_id: Mapped[str] = mapped_column(sa.Text)
    user_name: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    channel_id: Mapped[str] = mapped_column(sa.Text)
    team_id: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    query: Mapped[str] = mapped_column(sa.Text)
    result_count: Mapped[int] = mapped_column(sa.Integer, default=0, server_default="0")
    response_time: Mapped[int | None] = mapped_column(sa.Integer, nullable=True)  # milliseconds
    created_at: Mapped[dt.datetime] = mapped_column(
        sa.DateTime, default=utcnow, server_default=sa.text("CURRENT_TIMESTAMP"), index=True
    )
