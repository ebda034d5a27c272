"""Property database model."""

from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel, IntegerIdMixin


class Property(IntegerIdMixin, BaseMutableModel):
    """Real-estate property.

    Fields:
        id: Integer primary key
        name: Display name (max 100)
        address: Postal address (max 200)
        price: Current price, NUMERIC(18, 2)
        code_internal: Unique internal reference (max 50)
        year: Construction year
        owner_id: Current owner (ON DELETE RESTRICT)
        is_active: Soft-delete flag

    Indexes:
        - uq_properties_code_internal: (code_internal) unique
        - ix_properties_owner_active: (owner_id, is_active) for owner detail pages
    """

    __tablename__ = "properties"
    __table_args__ = (Index("ix_properties_owner_active", "owner_id", "is_active"),)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(String(200), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    code_internal: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("owners.id", ondelete="RESTRICT"),
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return (
            f"<Property(id={self.id}, code_internal={self.code_internal!r}, "
            f"owner_id={self.owner_id})>"
        )
