"""
booking_platform.db

Persistence package (SQLAlchemy async + Alembic).

Responsibilities:
- Shared model mixins and audit stamping.
- Engine/session setup and the per-module persistence context.
- The common Alembic environment used by every module's migrations.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Modules declare their own DeclarativeBase; nothing here owns a MetaData object.
