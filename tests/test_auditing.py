"""
tests.test_auditing

Audit-field stamping on flush.
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from sqlalchemy import select

from booking_platform.db.auditing import acting_user
from booking_platform.modules.passenger.models import Passenger, PassengerType
from booking_platform.modules.registry import build_module_registry, create_runtime_contexts
from booking_platform.settings import Settings
from booking_platform.startup import run_startup_sequence


@pytest_asyncio.fixture
async def passenger_ctx(settings: Settings):
    await run_startup_sequence(
        env="prod", modules=build_module_registry(settings, only=["passenger"])
    )
    contexts = create_runtime_contexts(settings)
    try:
        yield contexts["passenger"]
    finally:
        for ctx in contexts.values():
            await ctx.dispose()


@pytest.mark.asyncio
async def test_insert_and_update_are_stamped_with_acting_user(passenger_ctx) -> None:
    token = acting_user.set(42)
    try:
        async with passenger_ctx.session() as session:
            session.add(
                Passenger(passport_number="P-1", name="Ada", passenger_type=PassengerType.female)
            )
            await session.commit()
    finally:
        acting_user.reset(token)

    async with passenger_ctx.session() as session:
        p = (await session.execute(select(Passenger))).scalar_one()
        assert p.created_by == 42
        assert p.created_at is not None
        assert p.last_modified is None

    token = acting_user.set(7)
    try:
        async with passenger_ctx.session() as session:
            p = (await session.execute(select(Passenger))).scalar_one()
            p.age = 36
            await session.commit()
    finally:
        acting_user.reset(token)

    async with passenger_ctx.session() as session:
        p = (await session.execute(select(Passenger))).scalar_one()
        assert (p.created_by, p.last_modified_by, p.age) == (42, 7, 36)
        assert p.last_modified is not None


@pytest.mark.asyncio
async def test_failed_session_block_rolls_back(passenger_ctx) -> None:
    with pytest.raises(RuntimeError):
        async with passenger_ctx.session() as session:
            session.add(Passenger(passport_number="P-2", name="Grace"))
            await session.flush()
            raise RuntimeError("abort")

    async with passenger_ctx.session() as session:
        assert (await session.execute(select(Passenger))).scalars().all() == []
