"""
booking_platform.startup

Startup migration-and-seed orchestration.

Responsibilities:
- Contracts for persistence contexts, seeders and module descriptors.
- The single routine that migrates and seeds every module at boot.
"""

from booking_platform.startup.contracts import DataSeeder, ModuleDescriptor, PersistenceContext
from booking_platform.startup.errors import (
    DuplicateModule,
    MigrationFailed,
    SeedingFailed,
    StartupError,
)
from booking_platform.startup.orchestrator import (
    ModuleOutcome,
    StartupReport,
    run_startup_sequence,
)

__all__ = [
    "DataSeeder",
    "DuplicateModule",
    "MigrationFailed",
    "ModuleDescriptor",
    "ModuleOutcome",
    "PersistenceContext",
    "SeedingFailed",
    "StartupError",
    "StartupReport",
    "run_startup_sequence",
]
