"""Property DTOs (Data Transfer Objects).

Result dataclasses returned by property command and query handlers. They
are also the shape stored in the result cache.

DTOs:
    - TraceResult / ImageSummary / ImageDetail: nested rows
    - PropertyOwner: Owner block inside property detail
    - PropertyDetail: Result from GetPropertyById and CreateProperty
    - PropertyListItem / PropertyPage: Result from ListProperties
    - UpdatePropertyResult: Result from UpdateProperty
    - SaleResult: Result from SellProperty
    - AddedImages: Result from AddPropertyImages
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from src.domain.entities.owner import Owner
from src.domain.entities.property import Property
from src.domain.entities.property_image import PropertyImage
from src.domain.entities.property_trace import PropertyTrace
from src.domain.value_objects.property_listing import PropertyListing


@dataclass(frozen=True, kw_only=True)
class TraceResult:
    id: int
    name: str
    date_sale: datetime
    value: Decimal
    tax: Decimal

    @classmethod
    def from_entity(cls, trace: PropertyTrace) -> "TraceResult":
        assert trace.id is not None  # persisted traces only
        return cls(
            id=trace.id,
            name=trace.name,
            date_sale=trace.date_sale,
            value=trace.value,
            tax=trace.tax,
        )


@dataclass(frozen=True, kw_only=True)
class ImageSummary:
    """Image reference inside detail views (payload fetched separately)."""

    id: int
    enabled: bool

    @classmethod
    def from_entity(cls, image: PropertyImage) -> "ImageSummary":
        assert image.id is not None
        return cls(id=image.id, enabled=image.enabled)


@dataclass(frozen=True, kw_only=True)
class ImageDetail:
    id: int
    property_id: int
    file: str
    enabled: bool

    @classmethod
    def from_entity(cls, image: PropertyImage) -> "ImageDetail":
        assert image.id is not None
        return cls(
            id=image.id,
            property_id=image.property_id,
            file=image.file,
            enabled=image.enabled,
        )


@dataclass(frozen=True, kw_only=True)
class PropertyOwner:
    id: int
    name: str
    address: str
    photo: str | None
    birthday: date

    @classmethod
    def from_entity(cls, owner: Owner) -> "PropertyOwner":
        assert owner.id is not None
        return cls(
            id=owner.id,
            name=owner.name,
            address=owner.address,
            photo=owner.photo,
            birthday=owner.birthday,
        )


@dataclass(frozen=True, kw_only=True)
class PropertyDetail:
    """Property with owner, full trace history and enabled images.

    Attributes:
        owner: None only if the owner row is missing (should not happen:
            the foreign key restricts owner deletion).
        traces: Oldest first.
        images: Enabled images ordered by id.
    """

    id: int
    name: str
    address: str
    price: Decimal
    code_internal: str
    year: int
    owner_id: int
    owner: PropertyOwner | None
    traces: list[TraceResult] = field(default_factory=list)
    images: list[ImageSummary] = field(default_factory=list)

    @classmethod
    def from_entity(
        cls,
        property_: Property,
        owner: Owner | None,
        traces: list[PropertyTrace],
        images: list[PropertyImage],
    ) -> "PropertyDetail":
        assert property_.id is not None
        return cls(
            id=property_.id,
            name=property_.name,
            address=property_.address,
            price=property_.price,
            code_internal=property_.code_internal,
            year=property_.year,
            owner_id=property_.owner_id,
            owner=PropertyOwner.from_entity(owner) if owner is not None else None,
            traces=[TraceResult.from_entity(trace) for trace in traces],
            images=[ImageSummary.from_entity(image) for image in images],
        )


@dataclass(frozen=True, kw_only=True)
class PropertyListItem:
    id: int
    name: str
    address: str
    price: Decimal
    year: int
    code_internal: str
    owner_id: int
    owner_name: str
    image_count: int
    last_trace: TraceResult | None

    @classmethod
    def from_listing(cls, listing: PropertyListing) -> "PropertyListItem":
        return cls(
            id=listing.id,
            name=listing.name,
            address=listing.address,
            price=listing.price,
            year=listing.year,
            code_internal=listing.code_internal,
            owner_id=listing.owner_id,
            owner_name=listing.owner_name,
            image_count=listing.image_count,
            last_trace=(
                TraceResult.from_entity(listing.last_trace)
                if listing.last_trace is not None
                else None
            ),
        )


@dataclass(frozen=True, kw_only=True)
class PropertyPage:
    """One page of the property listing.

    Attributes:
        items: Page items ordered by id.
        total_count: Matches across all pages.
        page_number: 1-based page number.
        page_size: Requested page size.
    """

    items: list[PropertyListItem]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)


@dataclass(frozen=True, kw_only=True)
class UpdatePropertyResult:
    id: int
    old_price: Decimal
    new_price: Decimal
    price_changed: bool


@dataclass(frozen=True, kw_only=True)
class SaleResult:
    """Outcome of a completed sale.

    Attributes:
        property_id: Property sold.
        previous_owner_id: Owner before the sale.
        new_owner_id: Owner after the sale.
        sale_price: Price recorded (rounded to cents).
        tax: ``sale_price * tax_percentage / 100`` rounded half-up to cents.
        sale_date: When the sale was recorded (UTC).
    """

    property_id: int
    previous_owner_id: int
    new_owner_id: int
    sale_price: Decimal
    tax: Decimal
    sale_date: datetime


@dataclass(frozen=True, kw_only=True)
class AddedImages:
    property_id: int
    image_ids: list[int]
    skipped: int = 0
