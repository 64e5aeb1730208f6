"""
booking_platform.modules.flight.module

Flight module definition.

Responsibilities:
- Point startup at the flight migration scripts.
- Register reference data before the schedule that depends on it.
"""

from __future__ import annotations

from pathlib import Path

from booking_platform.modules import ModuleDefinition
from booking_platform.modules.flight.seeders import FlightReferenceDataSeeder, FlightScheduleSeeder

DEFINITION = ModuleDefinition(
    name="flight",
    script_location=Path(__file__).parent / "migrations",
    seeders=lambda: (FlightReferenceDataSeeder(), FlightScheduleSeeder()),
)


# --- Module Notes -----------------------------------------------------------
# Seeder order matters: `FlightScheduleSeeder` looks up airports by code and aircraft by model.
