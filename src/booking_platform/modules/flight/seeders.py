"""
booking_platform.modules.flight.seeders

Reference data for the flight module.

Responsibilities:
- Airports and aircraft (`FlightReferenceDataSeeder`).
- A scheduled flight with its seat map (`FlightScheduleSeeder`), which depends on
  the reference data and must therefore run after it.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from booking_platform.modules.flight.models import (
    Aircraft,
    Airport,
    Flight,
    FlightStatus,
    Seat,
    SeatClass,
    SeatType,
)
from booking_platform.startup.contracts import DataSeeder

AIRPORTS = [
    {"code": "LIS", "name": "Lisbon International Airport", "address": "Lisbon, Portugal"},
    {"code": "GRU", "name": "Sao Paulo International Airport", "address": "Sao Paulo, Brazil"},
]

AIRCRAFT = [
    {"model": "B737", "name": "Boeing 737", "manufacturing_year": 2005},
    {"model": "A300", "name": "Airbus 300", "manufacturing_year": 2000},
    {"model": "A320", "name": "Airbus 320", "manufacturing_year": 2003},
]

SCHEDULED_FLIGHT = {
    "flight_number": "BD467",
    "aircraft": "B737",
    "departure": "LIS",
    "arrive": "GRU",
    "departure_date": datetime(2027, 1, 31, 12, 0),
    "arrive_date": datetime(2027, 1, 31, 22, 0),
    "price": Decimal("8000.00"),
}

SEAT_MAP = [
    ("12A", SeatType.window, SeatClass.economy),
    ("12B", SeatType.middle, SeatClass.economy),
    ("12C", SeatType.aisle, SeatClass.economy),
    ("12D", SeatType.aisle, SeatClass.economy),
    ("12E", SeatType.middle, SeatClass.economy),
    ("12F", SeatType.window, SeatClass.economy),
]


class FlightReferenceDataSeeder(DataSeeder):
    async def seed_all(self, session: AsyncSession) -> None:
        existing_codes = set((await session.execute(select(Airport.code))).scalars())
        for row in AIRPORTS:
            if row["code"] not in existing_codes:
                session.add(Airport(**row))

        existing_models = set((await session.execute(select(Aircraft.model))).scalars())
        for row in AIRCRAFT:
            if row["model"] not in existing_models:
                session.add(Aircraft(**row))

        await session.flush()


class FlightScheduleSeeder(DataSeeder):
    async def seed_all(self, session: AsyncSession) -> None:
        number = SCHEDULED_FLIGHT["flight_number"]
        stmt = select(Flight).where(Flight.flight_number == number)
        flight = (await session.execute(stmt)).scalar_one_or_none()
        if flight is None:
            flight = await self._create_flight(session)

        stmt = select(Seat.seat_number).where(Seat.flight_id == flight.id)
        existing_seats = set((await session.execute(stmt)).scalars())
        for seat_number, seat_type, seat_class in SEAT_MAP:
            if seat_number in existing_seats:
                continue
            session.add(
                Seat(
                    flight_id=flight.id,
                    seat_number=seat_number,
                    type=seat_type,
                    seat_class=seat_class,
                    is_reserved=False,
                )
            )
        await session.flush()

    async def _create_flight(self, session: AsyncSession) -> Flight:
        aircraft_id = await _require_id(
            session, Aircraft.id, Aircraft.model, SCHEDULED_FLIGHT["aircraft"]
        )
        departure_id = await _require_id(
            session, Airport.id, Airport.code, SCHEDULED_FLIGHT["departure"]
        )
        arrive_id = await _require_id(session, Airport.id, Airport.code, SCHEDULED_FLIGHT["arrive"])

        departure: datetime = SCHEDULED_FLIGHT["departure_date"]
        arrive: datetime = SCHEDULED_FLIGHT["arrive_date"]
        flight = Flight(
            flight_number=SCHEDULED_FLIGHT["flight_number"],
            aircraft_id=aircraft_id,
            departure_airport_id=departure_id,
            arrive_airport_id=arrive_id,
            departure_date=departure,
            arrive_date=arrive,
            flight_date=departure.replace(hour=0, minute=0),
            duration_minutes=int((arrive - departure).total_seconds() // 60),
            status=FlightStatus.flying,
            price=SCHEDULED_FLIGHT["price"],
        )
        session.add(flight)
        await session.flush()
        return flight


async def _require_id(session: AsyncSession, id_column, key_column, key: str) -> int:
    stmt = select(id_column).where(key_column == key)
    found = (await session.execute(stmt)).scalar_one_or_none()
    if found is None:
        # Reference data is missing: the reference seeder did not run first.
        raise LookupError(f"{key_column.key} '{key}' not found")
    return found
