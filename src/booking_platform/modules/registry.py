"""
booking_platform.modules.registry

Ordered module registry.

Responsibilities:
- Fix the order in which modules are migrated and seeded.
- Turn module definitions into startup descriptors or long-lived runtime contexts.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import partial

from booking_platform.db.context import ModuleDbContext, open_module_context
from booking_platform.modules import ModuleDefinition
from booking_platform.modules.booking.module import DEFINITION as BOOKING
from booking_platform.modules.flight.module import DEFINITION as FLIGHT
from booking_platform.modules.identity.module import DEFINITION as IDENTITY
from booking_platform.modules.passenger.module import DEFINITION as PASSENGER
from booking_platform.settings import Settings
from booking_platform.startup.contracts import ModuleDescriptor

# Startup order. Booking comes last because it snapshots flight and passenger data.
MODULES: tuple[ModuleDefinition, ...] = (IDENTITY, FLIGHT, PASSENGER, BOOKING)


def module_names() -> list[str]:
    return [m.name for m in MODULES]


def select_modules(only: Iterable[str] | None = None) -> list[ModuleDefinition]:
    if only is None:
        return list(MODULES)
    wanted = set(only)
    unknown = wanted.difference(module_names())
    if unknown:
        raise ValueError(f"unknown module(s): {', '.join(sorted(unknown))}")
    # Registry order wins over the order names were given in.
    return [m for m in MODULES if m.name in wanted]


def build_module_registry(
    settings: Settings, *, only: Iterable[str] | None = None
) -> list[ModuleDescriptor]:
    return [
        ModuleDescriptor(
            name=definition.name,
            open_context=partial(
                open_module_context,
                module=definition.name,
                database_url=settings.module_database_url(definition.name),
                script_location=definition.script_location,
            ),
            seeders=tuple(definition.seeders()),
        )
        for definition in select_modules(only)
    ]


def create_runtime_contexts(settings: Settings) -> dict[str, ModuleDbContext]:
    # Long-lived contexts for request handling; the caller disposes them on shutdown.
    return {
        definition.name: ModuleDbContext(
            module=definition.name,
            database_url=settings.module_database_url(definition.name),
            script_location=definition.script_location,
        )
        for definition in MODULES
    }
