"""
booking_platform.observability.logging

Structured logging configuration for the platform.

Responsibilities:
- Configure `structlog` for JSON logs on stdout, stamped with service and env.
- Keep Alembic/SQLAlchemy chatter out of startup logs unless debugging.
- Provide a small wrapper for obtaining bound loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from booking_platform.settings import Settings

# Third-party loggers that report every revision / statement at INFO.
_NOISY_LOGGERS = ("alembic", "alembic.runtime.migration", "sqlalchemy.engine")


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    # Startup runs one upgrade per module; our own module_migrated events already cover it.
    noisy_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_static_fields(service=settings.service_name, env=settings.env),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_static_fields(**fields: str):
    # Lets one log index hold every environment without ambiguity.
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for key, value in fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Request metadata (request_id, user_id) is bound in `observability.middleware`; the
# startup sequence binds `module`/`seeder` on its own loggers.
