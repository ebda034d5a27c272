"""Property commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True).
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.value_objects.image_data import ImageUpload

DEFAULT_SALE_NOTES = "Property Sale"


@dataclass(frozen=True, kw_only=True)
class InlineOwner:
    """Owner data supplied alongside a property or sale.

    Used to create the owner when the referenced id does not exist yet, and
    (for sales) to refresh an existing owner's details.
    """

    name: str
    address: str
    birthday: date
    photo: str | None = None


@dataclass(frozen=True, kw_only=True)
class CreateProperty:
    """Create a property and its "Property Created" trace.

    Attributes:
        name: Display name (max 100).
        address: Postal address (max 200).
        price: Initial price (>= 0).
        code_internal: Unique internal reference (max 50).
        year: Construction year (1800-2100).
        owner_id: Owner of the property.
        owner: Inline owner created when ``owner_id`` does not exist.
    """

    name: str
    address: str
    price: Decimal
    code_internal: str
    year: int
    owner_id: int
    owner: InlineOwner | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateProperty:
    """Partially update a property.

    ``None`` fields are left unchanged; at least one field must be given.
    A price change appends a "Price Update" trace.
    """

    property_id: int
    name: str | None = None
    address: str | None = None
    price: Decimal | None = None
    code_internal: str | None = None
    year: int | None = None


@dataclass(frozen=True, kw_only=True)
class SellProperty:
    """Sell a property to a new owner.

    Attributes:
        property_id: Property being sold.
        new_owner_id: Buyer (must be > 0).
        sale_price: Agreed price (> 0.01).
        tax_percentage: Tax rate between 0 and 100.
        new_owner: Inline buyer data (creates or refreshes the buyer).
        notes: Free text kept in logs.

    Example:
        >>> command = SellProperty(
        ...     property_id=1,
        ...     new_owner_id=2,
        ...     sale_price=Decimal("100000"),
        ...     tax_percentage=Decimal("10"),
        ... )
    """

    property_id: int
    new_owner_id: int
    sale_price: Decimal
    tax_percentage: Decimal
    new_owner: InlineOwner | None = None
    notes: str = DEFAULT_SALE_NOTES


@dataclass(frozen=True, kw_only=True)
class AddPropertyImages:
    """Attach uploaded images to a property.

    Files with a disallowed extension or no content are skipped.
    """

    property_id: int
    uploads: list[ImageUpload] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class DeletePropertyImage:
    """Soft-delete (disable) an image."""

    image_id: int
