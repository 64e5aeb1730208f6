"""
Alembic environment for the passenger module.

Executed by Alembic, not imported by the application.
"""

from booking_platform.db.migrations import run_module_migrations, version_table_for
from booking_platform.modules.passenger.models import PassengerBase

run_module_migrations(PassengerBase.metadata, version_table=version_table_for("passenger"))
