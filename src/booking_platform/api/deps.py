"""
booking_platform.api.deps

FastAPI dependency wiring for the API layer.
"""

from __future__ import annotations

from fastapi import Request

from booking_platform.db.context import ModuleDbContext


def module_contexts(request: Request) -> dict[str, ModuleDbContext]:
    # Populated on app startup in `booking_platform.api.app.create_app`.
    return request.app.state.modules  # type: ignore[attr-defined]
