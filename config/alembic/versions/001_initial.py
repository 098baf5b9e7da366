"""Create bot_configurations and slack_commands tables.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "bot_configurations",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("workspace_name", sa.Text(), nullable=False),
        sa.Column("apache_answer_api_url_encrypted", sa.Text(), nullable=True),
        sa.Column("apache_answer_api_key_encrypted", sa.Text(), nullable=True),
        sa.Column("slack_bot_token_encrypted", sa.Text(), nullable=True),
        sa.Column("slack_app_token_encrypted", sa.Text(), nullable=True),
        sa.Column("slack_channel_id_encrypted", sa.Text(), nullable=True),
        sa.Column("slack_signing_secret_encrypted", sa.Text(), nullable=True),
        sa.Column("search_limit", sa.Integer(), server_default="10", nullable=False),
        sa.Column("enable_voting", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("encryption_salt", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )

    op.create_table(
        "slack_commands",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("command_name", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=False),
        sa.Column("user_name", sa.Text(), nullable=True),
        sa.Column("channel_id", sa.Text(), nullable=False),
        sa.Column("team_id", sa.Text(), nullable=True),
        sa.Column("query", sa.Text(), nullable=False),
        sa.Column("result_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("response_time", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )
    op.create_index("ix_slack_commands_created_at", "slack_commands", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_slack_commands_created_at", table_name="slack_commands")
    op.drop_table("slack_commands")
    op.drop_table("bot_configurations")
