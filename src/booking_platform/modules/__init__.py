"""
booking_platform.modules

Bounded business modules (identity, flight, passenger, booking).

Responsibilities:
- Describe what the platform needs to know about a module to migrate and seed it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from booking_platform.startup.contracts import DataSeeder


@dataclass(frozen=True, slots=True)
class ModuleDefinition:
    name: str
    # Alembic script directory holding env.py and versions/.
    script_location: Path
    # Builds the module's seeders in the order they must run.
    seeders: Callable[[], Sequence[DataSeeder]] = tuple


# --- Module Notes -----------------------------------------------------------
# Every module package exposes `DEFINITION` from its `module.py`; the ordered list
# lives in `booking_platform.modules.registry`.
