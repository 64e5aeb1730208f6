"""
booking_platform.db.base

Shared declarative building blocks.

Responsibilities:
- Provide the audit columns every business entity carries.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger
from sqlalchemy.orm import Mapped, mapped_column


class AuditableMixin:
    # Filled by `booking_platform.db.auditing` on flush; never set by hand.
    created_at: Mapped[datetime | None] = mapped_column(nullable=True)
    created_by: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    last_modified: Mapped[datetime | None] = mapped_column(nullable=True)
    last_modified_by: Mapped[int | None] = mapped_column(BigInteger, nullable=True)


# --- Module Notes -----------------------------------------------------------
# Each module subclasses DeclarativeBase itself so its metadata (and migrations) stay isolated.
