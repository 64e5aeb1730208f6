"""
booking_platform.modules.booking.module

Booking module definition.
"""

from __future__ import annotations

from pathlib import Path

from booking_platform.modules import ModuleDefinition

DEFINITION = ModuleDefinition(
    name="booking",
    script_location=Path(__file__).parent / "migrations",
)


# --- Module Notes -----------------------------------------------------------
# No seeders: bookings only come from user requests.
