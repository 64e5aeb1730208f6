"""initial booking schema

Revision ID: booking_0001
Revises:
Create Date: 2026-10-19 09:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

from booking_platform.db.migrations import audit_columns

revision = "booking_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("passenger_id", sa.Integer(), nullable=False),
        sa.Column("passenger_name", sa.String(256), nullable=False),
        sa.Column("flight_id", sa.Integer(), nullable=False),
        sa.Column("flight_number", sa.String(16), nullable=False),
        sa.Column("aircraft_id", sa.Integer(), nullable=False),
        sa.Column("departure_airport_id", sa.Integer(), nullable=False),
        sa.Column("arrive_airport_id", sa.Integer(), nullable=False),
        sa.Column("flight_date", sa.DateTime(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("seat_number", sa.String(8), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        *audit_columns(),
    )
    op.create_index("ix_bookings_passenger_id", "bookings", ["passenger_id"])
    op.create_index("ix_bookings_flight_id", "bookings", ["flight_id"])


def downgrade() -> None:
    op.drop_index("ix_bookings_flight_id", table_name="bookings")
    op.drop_index("ix_bookings_passenger_id", table_name="bookings")
    op.drop_table("bookings")
