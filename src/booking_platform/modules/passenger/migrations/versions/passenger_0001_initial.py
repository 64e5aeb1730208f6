"""initial passenger schema

Revision ID: passenger_0001
Revises:
Create Date: 2026-10-19 09:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

from booking_platform.db.migrations import audit_columns

revision = "passenger_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "passengers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("passport_number", sa.String(32), nullable=False),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column(
            "passenger_type",
            sa.Enum(
                "unknown", "male", "female", "baby",
                name="passengertype", native_enum=False, length=32,
            ),
            nullable=False,
        ),
        sa.Column("age", sa.Integer(), nullable=True),
        *audit_columns(),
        sa.UniqueConstraint("passport_number", name="uq_passengers_passport_number"),
    )


def downgrade() -> None:
    op.drop_table("passengers")
