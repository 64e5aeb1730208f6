"""
booking_platform.modules.flight.models

Flight schema.
"""

from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, Enum, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from booking_platform.db.base import AuditableMixin


class FlightBase(DeclarativeBase):
    pass


class FlightStatus(enum.StrEnum):
    # Stored by member name; treat names as a stable contract.
    flying = "FLYING"
    delay = "DELAY"
    canceled = "CANCELED"
    completed = "COMPLETED"


class SeatType(enum.StrEnum):
    window = "WINDOW"
    middle = "MIDDLE"
    aisle = "AISLE"


class SeatClass(enum.StrEnum):
    first_class = "FIRST_CLASS"
    business = "BUSINESS"
    economy = "ECONOMY"


class Airport(AuditableMixin, FlightBase):
    __tablename__ = "airports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(8), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    address: Mapped[str] = mapped_column(String(256), nullable=False)


class Aircraft(AuditableMixin, FlightBase):
    __tablename__ = "aircraft"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    model: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    manufacturing_year: Mapped[int] = mapped_column(Integer, nullable=False)


class Flight(AuditableMixin, FlightBase):
    __tablename__ = "flights"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flight_number: Mapped[str] = mapped_column(String(16), nullable=False, unique=True)
    aircraft_id: Mapped[int] = mapped_column(ForeignKey("aircraft.id"), nullable=False)
    departure_airport_id: Mapped[int] = mapped_column(ForeignKey("airports.id"), nullable=False)
    arrive_airport_id: Mapped[int] = mapped_column(ForeignKey("airports.id"), nullable=False)
    departure_date: Mapped[datetime] = mapped_column(nullable=False)
    arrive_date: Mapped[datetime] = mapped_column(nullable=False)
    flight_date: Mapped[datetime] = mapped_column(nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[FlightStatus] = mapped_column(
        Enum(FlightStatus, native_enum=False, length=32), nullable=False
    )
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)


class Seat(AuditableMixin, FlightBase):
    __tablename__ = "seats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flight_id: Mapped[int] = mapped_column(ForeignKey("flights.id"), nullable=False, index=True)
    seat_number: Mapped[str] = mapped_column(String(8), nullable=False)
    type: Mapped[SeatType] = mapped_column(
        Enum(SeatType, native_enum=False, length=32), nullable=False
    )
    seat_class: Mapped[SeatClass] = mapped_column(
        Enum(SeatClass, native_enum=False, length=32), nullable=False
    )
    is_reserved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (UniqueConstraint("flight_id", "seat_number", name="uq_seats_flight_seat"),)
