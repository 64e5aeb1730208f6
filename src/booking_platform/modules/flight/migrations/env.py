"""
Alembic environment for the flight module.

Executed by Alembic, not imported by the application.
"""

from booking_platform.db.migrations import run_module_migrations, version_table_for
from booking_platform.modules.flight.models import FlightBase

run_module_migrations(FlightBase.metadata, version_table=version_table_for("flight"))
