"""
booking_platform.startup.contracts

Collaborator contracts consumed by the startup sequence.

Responsibilities:
- `PersistenceContext`: what a module's storage handle must offer (migrate + sessions).
- `DataSeeder`: base class for idempotent initial-data routines.
- `ModuleDescriptor`: a module's name, context factory and ordered seeders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass, field
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession


class PersistenceContext(Protocol):
    async def migrate(self) -> None:
        """Apply pending migrations. Must be safe to call on a current schema."""
        ...

    def session(self) -> AbstractAsyncContextManager[AsyncSession]: ...


class DataSeeder(ABC):
    """
    Inserts baseline data a module needs to function.
    Implementations must check for existing rows so repeated runs add nothing.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    async def seed_all(self, session: AsyncSession) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class ModuleDescriptor:
    name: str
    # Each call yields a fresh, scoped context; the caller's `async with` releases it.
    open_context: Callable[[], AbstractAsyncContextManager[PersistenceContext]]
    # Run in this order.
    seeders: Sequence[DataSeeder] = field(default_factory=tuple)


# --- Module Notes -----------------------------------------------------------
# `booking_platform.db.context.ModuleDbContext` is the production PersistenceContext;
# tests substitute in-memory fakes that record calls.
