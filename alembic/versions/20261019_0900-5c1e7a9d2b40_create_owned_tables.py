"""create_owned_tables

Revision ID: 5c1e7a9d2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5c1e7a9d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, personal_requests, call_logs and app_versions."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Employee email (unique, case-sensitive)",
        ),
        sa.Column(
            "name",
            sa.String(length=255),
            nullable=False,
            comment="Display name from the employee directory",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "personal_requests",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "requested_contact",
            sa.String(length=255),
            nullable=False,
            comment="Directory contact name as typed by the requester",
        ),
        sa.Column(
            "requested_by",
            sa.String(length=255),
            nullable=False,
            comment="Requester display name",
        ),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="pending, approved or rejected",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_personal_requests_status_created_at",
        "personal_requests",
        ["status", "created_at"],
    )
    op.create_index(
        "ix_personal_requests_requested_by_status",
        "personal_requests",
        ["requested_by", "status"],
    )

    op.create_table(
        "call_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("caller_name", sa.String(length=255), nullable=False),
        sa.Column("rship_manager_name", sa.String(length=255), nullable=False),
        sa.Column(
            "call_type",
            sa.String(length=50),
            nullable=False,
            comment="Lower-cased call type",
        ),
        sa.Column("called_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("duration_seconds", sa.Integer(), nullable=False),
        sa.Column(
            "uploaded_by",
            sa.String(length=255),
            nullable=False,
            comment="Display name of the uploading agent",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_call_logs_uploaded_by", "call_logs", ["uploaded_by"])

    op.create_table(
        "app_versions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("version", sa.String(length=50), nullable=False),
        sa.Column("update_type", sa.String(length=50), nullable=False),
        sa.Column("changelog", sa.Text(), nullable=True),
        sa.Column("download_url", sa.String(length=1024), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop owned tables."""
    op.drop_table("app_versions")
    op.drop_index("ix_call_logs_uploaded_by", table_name="call_logs")
    op.drop_table("call_logs")
    op.drop_index(
        "ix_personal_requests_requested_by_status", table_name="personal_requests"
    )
    op.drop_index(
        "ix_personal_requests_status_created_at", table_name="personal_requests"
    )
    op.drop_table("personal_requests")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
