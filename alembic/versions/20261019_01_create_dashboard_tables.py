"""create dashboard tables

Revision ID: 20261019_01
Revises: 
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = "20261019_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "n8n_configs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("api_url", sa.String(length=2048), nullable=False),
        sa.Column("api_key", sa.Text(), nullable=False),
        sa.Column("refresh_interval", sa.Integer(), nullable=False, server_default=sa.text("60")),
        sa.Column("notifications_enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_table(
        "workflow_alerts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("workflow_id", sa.String(length=128), nullable=False),
        sa.Column("workflow_name", sa.String(length=256), nullable=False),
        sa.Column("alert_type", sa.String(length=32), nullable=False),
        sa.Column("threshold", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_workflow_alerts_workflow_id", "workflow_alerts", ["workflow_id"])
    op.create_table(
        "webhook_tests",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("url", sa.String(length=2048), nullable=False),
        sa.Column("method", sa.String(length=16), nullable=False, server_default="GET"),
        sa.Column(
            "headers",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("webhook_tests")
    op.drop_index("ix_workflow_alerts_workflow_id", table_name="workflow_alerts")
    op.drop_table("workflow_alerts")
    op.drop_table("n8n_configs")
