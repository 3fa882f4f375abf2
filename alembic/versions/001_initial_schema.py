"""Initial schema — roster, settings and webhook event log.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Agents (roster order kept in `position`)
    op.create_table(
        "agents",
        sa.Column("id", sa.String(100), primary_key=True),
        sa.Column("position", sa.Integer, nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("is_available", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("qualification", sa.String(20), nullable=True),
        sa.Column("distribution_percentage", sa.Integer, nullable=True),
        sa.Column("score", sa.Float, nullable=True),
        sa.Column("lead_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("email", sa.String(200), nullable=True),
        sa.Column("role", sa.String(50), nullable=True),
        sa.Column("location_id", sa.String(100), nullable=True),
    )
    op.create_index("idx_agents_position", "agents", ["position"])

    # Scalar settings (distribution flag, CRM key, custom callback)
    op.create_table(
        "app_settings",
        sa.Column("key", sa.String(100), primary_key=True),
        sa.Column("value", sa.JSON, nullable=False),
        sa.Column(
            "updated_at", sa.DateTime, nullable=False, server_default=sa.func.now()
        ),
    )

    # Inbound webhook log
    op.create_table(
        "webhook_events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("lead_data", sa.JSON, nullable=True),
        sa.Column("status", sa.Text, nullable=False),
        sa.Column("assignment", sa.JSON, nullable=True),
        sa.Column("received_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("idx_webhook_events_received", "webhook_events", ["received_at"])


def downgrade() -> None:
    op.drop_index("idx_webhook_events_received", table_name="webhook_events")
    op.drop_table("webhook_events")
    op.drop_table("app_settings")
    op.drop_index("idx_agents_position", table_name="agents")
    op.drop_table("agents")
