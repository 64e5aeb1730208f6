"""
booking_platform.api.app

FastAPI app factory for the Booking Platform.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Run the startup migration-and-seed sequence before serving.
- Open and dispose the long-lived per-module persistence contexts.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from booking_platform import __version__
from booking_platform.api.routers.health import router as health_router
from booking_platform.auth.jwt import JwtConfig
from booking_platform.modules.registry import build_module_registry, create_runtime_contexts
from booking_platform.observability.logging import configure_logging, get_logger
from booking_platform.observability.middleware import RequestContextMiddleware
from booking_platform.settings import Settings
from booking_platform.startup import run_startup_sequence

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # StartupError propagates: the server must not come up on an unmigrated schema.
        await run_startup_sequence(
            env=settings.env,
            modules=build_module_registry(settings),
            step_timeout=settings.startup_step_timeout_seconds,
        )
        app.state.modules = create_runtime_contexts(settings)
        try:
            yield
        finally:
            for ctx in app.state.modules.values():
                await ctx.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Booking Platform",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware, jwt_cfg=JwtConfig.from_settings(settings))
    app.include_router(health_router, tags=["health"])

    return app


# --- Module Notes -----------------------------------------------------------
# Business routers per module mount here; they obtain sessions from
# `app.state.modules[<module>].session()`.
