"""Create marketplace tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  users, user_sessions, single_offers, multi_offers, jobs and
       job_applications, as read and written by this service.

Rollback: downgrade() drops every table (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def _user_fk(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.Uuid(),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("gender", sa.String(16), nullable=False, server_default=""),
        *_timestamps(),
    )

    op.create_table(
        "user_sessions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("token", sa.String(255), nullable=False),
        _user_fk("user"),
        sa.Column("role", sa.String(32), nullable=False, server_default="customer"),
        *_timestamps(),
    )
    # Every authenticated request looks a session up by token
    op.create_index("ix_user_sessions_token", "user_sessions", ["token"], unique=True)

    op.create_table(
        "single_offers",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("type", sa.String(32), nullable=False, server_default="jasa-titip"),
        sa.Column("price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("pickup_area", sa.String(255), nullable=True),
        sa.Column("delivery_area", sa.String(255), nullable=True),
        sa.Column("available_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("offer_status", sa.String(32), nullable=False, server_default="available"),
        sa.Column("expired_at", sa.DateTime(timezone=True), nullable=True),
        _user_fk("freelancer"),
        *_timestamps(),
    )
    op.create_index("idx_single_offers_created_at", "single_offers", ["created_at"])

    op.create_table(
        "multi_offers",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("available_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="available"),
        _user_fk("freelancer"),
        *_timestamps(),
    )
    op.create_index("idx_multi_offers_created_at", "multi_offers", ["created_at"])

    op.create_table(
        "jobs",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="open"),
        _user_fk("customer"),
        *_timestamps(),
    )

    op.create_table(
        "job_applications",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "job",
            sa.Uuid(),
            sa.ForeignKey("jobs.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _user_fk("freelancer"),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending"),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("job_applications")
    op.drop_table("jobs")
    op.drop_index("idx_multi_offers_created_at", table_name="multi_offers")
    op.drop_table("multi_offers")
    op.drop_index("idx_single_offers_created_at", table_name="single_offers")
    op.drop_table("single_offers")
    op.drop_index("ix_user_sessions_token", table_name="user_sessions")
    op.drop_table("user_sessions")
    op.drop_table("users")
