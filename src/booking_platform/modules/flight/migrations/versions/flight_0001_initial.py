"""initial flight schema

Revision ID: flight_0001
Revises:
Create Date: 2026-10-19 09:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

from booking_platform.db.migrations import audit_columns

revision = "flight_0001"
down_revision = None
branch_labels = None
depends_on = None

_FLIGHT_STATUS = sa.Enum(
    "flying", "delay", "canceled", "completed",
    name="flightstatus", native_enum=False, length=32,
)
_SEAT_TYPE = sa.Enum("window", "middle", "aisle", name="seattype", native_enum=False, length=32)
_SEAT_CLASS = sa.Enum(
    "first_class", "business", "economy", name="seatclass", native_enum=False, length=32
)


def upgrade() -> None:
    op.create_table(
        "airports",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(8), nullable=False),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("address", sa.String(256), nullable=False),
        *audit_columns(),
        sa.UniqueConstraint("code", name="uq_airports_code"),
    )
    op.create_table(
        "aircraft",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("model", sa.String(32), nullable=False),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("manufacturing_year", sa.Integer(), nullable=False),
        *audit_columns(),
        sa.UniqueConstraint("model", name="uq_aircraft_model"),
    )
    op.create_table(
        "flights",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("flight_number", sa.String(16), nullable=False),
        sa.Column("aircraft_id", sa.Integer(), sa.ForeignKey("aircraft.id"), nullable=False),
        sa.Column(
            "departure_airport_id", sa.Integer(), sa.ForeignKey("airports.id"), nullable=False
        ),
        sa.Column("arrive_airport_id", sa.Integer(), sa.ForeignKey("airports.id"), nullable=False),
        sa.Column("departure_date", sa.DateTime(), nullable=False),
        sa.Column("arrive_date", sa.DateTime(), nullable=False),
        sa.Column("flight_date", sa.DateTime(), nullable=False),
        sa.Column("duration_minutes", sa.Integer(), nullable=False),
        sa.Column("status", _FLIGHT_STATUS, nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        *audit_columns(),
        sa.UniqueConstraint("flight_number", name="uq_flights_flight_number"),
    )
    op.create_table(
        "seats",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("flight_id", sa.Integer(), sa.ForeignKey("flights.id"), nullable=False),
        sa.Column("seat_number", sa.String(8), nullable=False),
        sa.Column("type", _SEAT_TYPE, nullable=False),
        sa.Column("seat_class", _SEAT_CLASS, nullable=False),
        sa.Column("is_reserved", sa.Boolean(), nullable=False, server_default=sa.false()),
        *audit_columns(),
        sa.UniqueConstraint("flight_id", "seat_number", name="uq_seats_flight_seat"),
    )
    op.create_index("ix_seats_flight_id", "seats", ["flight_id"])


def downgrade() -> None:
    op.drop_index("ix_seats_flight_id", table_name="seats")
    op.drop_table("seats")
    op.drop_table("flights")
    op.drop_table("aircraft")
    op.drop_table("airports")
