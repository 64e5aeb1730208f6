"""
booking_platform.modules.identity.seeders

Baseline identity data: the built-in roles and the default administrator.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from booking_platform.modules.identity.models import Role, User
from booking_platform.startup.contracts import DataSeeder

ADMIN_ROLE = "Admin"
USER_ROLE = "User"

DEFAULT_ADMIN = {
    "username": "admin",
    "email": "admin@booking.local",
    "first_name": "Platform",
    "last_name": "Administrator",
    "passport_number": "000000000",
}


class IdentityDataSeeder(DataSeeder):
    async def seed_all(self, session: AsyncSession) -> None:
        roles = {}
        for name in (ADMIN_ROLE, USER_ROLE):
            roles[name] = await self._ensure_role(session, name)
        await self._ensure_admin(session, roles[ADMIN_ROLE])

    async def _ensure_role(self, session: AsyncSession, name: str) -> Role:
        stmt = select(Role).where(Role.normalized_name == name.upper())
        role = (await session.execute(stmt)).scalar_one_or_none()
        if role is None:
            role = Role(name=name, normalized_name=name.upper())
            session.add(role)
            await session.flush()
        return role

    async def _ensure_admin(self, session: AsyncSession, admin_role: Role) -> None:
        stmt = select(User.id).where(User.username == DEFAULT_ADMIN["username"])
        if (await session.execute(stmt)).scalar_one_or_none() is not None:
            return
        session.add(User(**DEFAULT_ADMIN, roles=[admin_role]))
        await session.flush()
