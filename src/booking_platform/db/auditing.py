"""
booking_platform.db.auditing

Audit-field stamping for `AuditableMixin` entities.

Responsibilities:
- Hold the acting user id for the current task (None means the system itself).
- Stamp created/modified fields on flush for every session in the process.
"""

from __future__ import annotations

from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import event
from sqlalchemy.orm import Session

from booking_platform.db.base import AuditableMixin

acting_user: ContextVar[int | None] = ContextVar("acting_user", default=None)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC).replace(tzinfo=None)


@event.listens_for(Session, "before_flush")
def _stamp_audit_fields(session: Session, _flush_context: Any, _instances: Any) -> None:
    user_id = acting_user.get()
    now = _utcnow()

    for obj in session.new:
        if isinstance(obj, AuditableMixin):
            obj.created_at = now
            obj.created_by = user_id

    for obj in session.dirty:
        # `dirty` also lists objects with unchanged attributes that were merely touched.
        if isinstance(obj, AuditableMixin) and session.is_modified(obj, include_collections=False):
            obj.last_modified = now
            obj.last_modified_by = user_id


# --- Module Notes -----------------------------------------------------------
# Listening on the sync `Session` class also covers AsyncSession, which wraps one.
