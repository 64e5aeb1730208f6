"""
booking_platform.modules.booking.models

Booking schema.

Passenger and trip details are copied at booking time; ids referring to other
modules are plain integers because each module lives in its own database.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from booking_platform.db.base import AuditableMixin


class BookingBase(DeclarativeBase):
    pass


class Booking(AuditableMixin, BookingBase):
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Passenger snapshot.
    passenger_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    passenger_name: Mapped[str] = mapped_column(String(256), nullable=False)

    # Trip snapshot.
    flight_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    flight_number: Mapped[str] = mapped_column(String(16), nullable=False)
    aircraft_id: Mapped[int] = mapped_column(Integer, nullable=False)
    departure_airport_id: Mapped[int] = mapped_column(Integer, nullable=False)
    arrive_airport_id: Mapped[int] = mapped_column(Integer, nullable=False)
    flight_date: Mapped[datetime] = mapped_column(nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    seat_number: Mapped[str] = mapped_column(String(8), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
