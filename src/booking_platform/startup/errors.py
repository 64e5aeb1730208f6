"""
booking_platform.startup.errors

Errors raised by the startup sequence. All of them are fatal to the host process.
"""

from __future__ import annotations


class StartupError(Exception):
    def __init__(self, module: str, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.module = module
        self.cause = cause


class DuplicateModule(StartupError):
    def __init__(self, module: str) -> None:
        super().__init__(module, f"module '{module}' is registered more than once")


class MigrationFailed(StartupError):
    def __init__(self, module: str, cause: BaseException) -> None:
        super().__init__(module, f"migration failed for module '{module}': {cause!r}", cause)


class SeedingFailed(StartupError):
    def __init__(self, module: str, seeder: str | None, cause: BaseException) -> None:
        # seeder is None when the failure happened outside any seeder (e.g. opening a session).
        where = f"seeder '{seeder}'" if seeder is not None else "seeding"
        super().__init__(module, f"{where} failed for module '{module}': {cause!r}", cause)
        self.seeder = seeder
