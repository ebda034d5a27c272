"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Declarative base for ALL models (provides created_at)
- IntegerIdMixin / UuidIdMixin: primary key flavours
- TimestampMixin: adds updated_at
- BaseMutableModel: base for mutable models (created_at + updated_at)

Real-estate tables (owners, properties, traces, images) use integer
autoincrement keys; auth tables (users, roles, refresh tokens) use UUIDv7.

Timestamps are generated in Python at flush time so that the values are
known without a round trip, and also carry a server default for rows
written outside the ORM (migrations, seeders).

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities should NOT inherit from this
- Domain entities are mapped to/from database models by repositories

Architecture:
    BaseModel (created_at)
        ↑
        ├── BaseMutableModel (+ updated_at)
        │   ├── Owner, Property, User
        │
        └── PropertyTrace, PropertyImage, Role, RefreshToken
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Integer, MetaData, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utc_now() -> datetime:
    return datetime.now(UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models (mutable and immutable).

    Provides:
        - created_at: Timestamp when record was created (UTC)

    Primary keys come from IntegerIdMixin or UuidIdMixin.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(getattr(self, "id", None)),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class IntegerIdMixin:
    """Integer autoincrement primary key."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)


class UuidIdMixin:
    """UUIDv7 primary key (time-ordered, index friendly)."""

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
    )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides:
        - created_at: Timestamp when created (from BaseModel)
        - updated_at: Timestamp when last updated (from TimestampMixin)

    Usage:
        class Owner(IntegerIdMixin, BaseMutableModel):
            __tablename__ = "owners"
            name: Mapped[str]
    """

    __abstract__ = True


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes read back from backends without tz support."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)
