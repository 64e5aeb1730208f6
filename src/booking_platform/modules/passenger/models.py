from __future__ import annotations

import enum

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from booking_platform.db.base import AuditableMixin


class PassengerBase(DeclarativeBase):
    pass


class PassengerType(enum.StrEnum):
    unknown = "UNKNOWN"
    male = "MALE"
    female = "FEMALE"
    baby = "BABY"


class Passenger(AuditableMixin, PassengerBase):
    __tablename__ = "passengers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    passport_number: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    passenger_type: Mapped[PassengerType] = mapped_column(
        Enum(PassengerType, native_enum=False, length=32),
        nullable=False,
        default=PassengerType.unknown,
    )
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
