"""Property image database model."""

from sqlalchemy import Boolean, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel, IntegerIdMixin


class PropertyImage(IntegerIdMixin, BaseModel):
    """Image attached to a property, stored inline as a data URI.

    Fields:
        id: Integer primary key
        property_id: Property (ON DELETE CASCADE)
        file: ``data:<content-type>;base64,...`` text
        enabled: Soft-delete flag
    """

    __tablename__ = "property_images"

    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    file: Mapped[str] = mapped_column(Text, nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
