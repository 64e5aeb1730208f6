"""
booking_platform.modules.passenger.module

Passenger module definition.
"""

from __future__ import annotations

from pathlib import Path

from booking_platform.modules import ModuleDefinition

# Passengers are created by users; there is no baseline data.
DEFINITION = ModuleDefinition(
    name="passenger",
    script_location=Path(__file__).parent / "migrations",
)


# --- Module Notes -----------------------------------------------------------
# Migrated before booking so booking snapshots always have a passenger source.
