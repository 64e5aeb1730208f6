"""
Alembic environment for the identity module.

Executed by Alembic, not imported by the application.
"""

from booking_platform.db.migrations import run_module_migrations, version_table_for
from booking_platform.modules.identity.models import IdentityBase

run_module_migrations(IdentityBase.metadata, version_table=version_table_for("identity"))
