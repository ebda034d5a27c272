"""Owner database model."""

from datetime import date

from sqlalchemy import Boolean, Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel, IntegerIdMixin


class Owner(IntegerIdMixin, BaseMutableModel):
    """Owner of one or more properties.

    Fields:
        id: Integer primary key (autoincrement, explicit ids allowed)
        name: Full name (max 100)
        address: Postal address (max 200)
        photo: Base64 data URI (nullable, unbounded text)
        birthday: Date of birth
        is_active: Soft-delete flag (inactive owners are hidden from listings)

    Referenced by:
        - properties.owner_id (ON DELETE RESTRICT)
    """

    __tablename__ = "owners"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    photo: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    birthday: Mapped[date] = mapped_column(Date, nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Owner(id={self.id}, name={self.name!r}, is_active={self.is_active})>"
