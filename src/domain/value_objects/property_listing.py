"""Read model for one row of the property listing."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.entities.property_trace import PropertyTrace


@dataclass(frozen=True, slots=True, kw_only=True)
class PropertyListing:
    """Property summary joined with its owner name, image count and last trace."""

    id: int
    name: str
    address: str
    price: Decimal
    year: int
    code_internal: str
    owner_id: int
    owner_name: str
    image_count: int
    last_trace: PropertyTrace | None
