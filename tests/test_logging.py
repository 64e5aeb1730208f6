"""
tests.test_logging

Structured logging setup.
"""

from __future__ import annotations

import logging

from booking_platform.observability.logging import _add_static_fields, configure_logging
from booking_platform.settings import Settings


def test_static_fields_do_not_override_bound_values() -> None:
    processor = _add_static_fields(service="booking-platform", env="prod")

    event = processor(None, "info", {"event": "module_migrated", "env": "dev"})

    assert event == {"event": "module_migrated", "service": "booking-platform", "env": "dev"}


def test_migration_chatter_is_quiet_unless_debugging() -> None:
    configure_logging(Settings(env="prod", log_level="INFO"))
    assert logging.getLogger("alembic.runtime.migration").level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    configure_logging(Settings(env="prod", log_level="DEBUG"))
    assert logging.getLogger("alembic.runtime.migration").level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.DEBUG

    configure_logging(Settings(env="prod", log_level="WARNING"))
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


# --- Module Notes -----------------------------------------------------------
# Rendering is left to structlog; these tests only pin what this package adds.
