"""
booking_platform.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) checking every module database.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.status import HTTP_200_OK, HTTP_503_SERVICE_UNAVAILABLE

from booking_platform.api.deps import module_contexts
from booking_platform.db.context import ModuleDbContext
from booking_platform.observability.logging import get_logger

router = APIRouter()
log = get_logger(__name__)


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(
    contexts: dict[str, ModuleDbContext] = Depends(module_contexts),
) -> JSONResponse:
    modules: dict[str, str] = {}
    for name, ctx in contexts.items():
        try:
            await ctx.ping()
        except Exception as e:
            log.warning("module_not_ready", module=name, error=repr(e))
            modules[name] = "unavailable"
        else:
            modules[name] = "ok"

    ready = all(state == "ok" for state in modules.values())
    return JSONResponse(
        status_code=HTTP_200_OK if ready else HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "ready" if ready else "not_ready", "modules": modules},
    )


# --- Module Notes -----------------------------------------------------------
# /readyz only answers after startup returned, i.e. after migrations and seeding.
