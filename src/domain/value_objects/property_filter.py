"""Filter and paging options for property listings."""

from dataclasses import dataclass
from decimal import Decimal

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True, slots=True, kw_only=True)
class PropertyFilter:
    """Listing criteria.

    Attributes:
        name: Case-insensitive substring of the property name.
        min_price: Inclusive lower price bound.
        max_price: Inclusive upper price bound.
        year: Exact construction year.
        owner_id: Only properties of this owner.
        page: 1-based page number.
        page_size: Items per page (1..100).
    """

    name: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    year: int | None = None
    owner_id: int | None = None
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be at least 1")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size
