"""PropertyTrace domain entity.

Append-only audit record of a price or ownership change. Traces are created
by Property methods and are never modified after construction.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

TRACE_NAME_MAX_LENGTH = 100

PROPERTY_CREATED_TRACE = "Property Created"
PRICE_UPDATE_TRACE = "Price Update"
SOLD_TO_TRACE_TEMPLATE = "Sold to {owner_name}"


@dataclass(frozen=True, slots=True, kw_only=True)
class PropertyTrace:
    """Immutable price/ownership event for one property.

    Attributes:
        id: Trace identifier (None until persisted).
        property_id: Property the event belongs to.
        name: Event label ("Price Update", "Sold to Ana", ...).
        date_sale: When the event happened (UTC).
        value: Price recorded by the event.
        tax: Tax charged by the event (zero for non-sales).
    """

    property_id: int
    name: str
    date_sale: datetime
    value: Decimal
    tax: Decimal
    id: int | None = None

    @property
    def is_price_update(self) -> bool:
        return self.name.lower() == PRICE_UPDATE_TRACE.lower()
