"""
Alembic environment for the booking module.

Executed by Alembic, not imported by the application.
"""

from booking_platform.db.migrations import run_module_migrations, version_table_for
from booking_platform.modules.booking.models import BookingBase

run_module_migrations(BookingBase.metadata, version_table=version_table_for("booking"))
