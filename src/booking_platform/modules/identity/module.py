"""
booking_platform.modules.identity.module

Identity module definition: schema migrations plus role and admin seed data.
"""

from __future__ import annotations

from pathlib import Path

from booking_platform.modules import ModuleDefinition
from booking_platform.modules.identity.seeders import IdentityDataSeeder

DEFINITION = ModuleDefinition(
    name="identity",
    script_location=Path(__file__).parent / "migrations",
    seeders=lambda: (IdentityDataSeeder(),),
)


# --- Module Notes -----------------------------------------------------------
# Seeds roles before the admin user that is assigned to them.
