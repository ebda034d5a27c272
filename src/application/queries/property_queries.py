"""Property queries (CQRS read operations).

Queries represent requests for property data. They are immutable
dataclasses with question-like names. Queries NEVER change state.
"""

from dataclasses import dataclass, field

from src.domain.value_objects.property_filter import PropertyFilter


@dataclass(frozen=True, kw_only=True)
class GetPropertyById:
    """Get one active property with owner, trace history and enabled images.

    Attributes:
        property_id: Property identifier.
    """

    property_id: int


@dataclass(frozen=True, kw_only=True)
class ListProperties:
    """Get one page of active properties.

    Attributes:
        criteria: Filters (name contains, price range, year, owner) and paging.

    Example:
        >>> query = ListProperties(criteria=PropertyFilter(name="casa", page=2))
        >>> result = await mediator.send(query)
    """

    criteria: PropertyFilter = field(default_factory=PropertyFilter)


@dataclass(frozen=True, kw_only=True)
class GetPropertyImage:
    """Get one image with its data URI payload (enabled or not)."""

    image_id: int
