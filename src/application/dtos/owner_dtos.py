"""Owner DTOs (Data Transfer Objects).

Result dataclasses returned by owner command and query handlers. They are
also the shape stored in the result cache.

DTOs:
    - OwnerPropertySummary: Property row inside an owner listing
    - OwnerResult: Owner with property summaries (list, create, photo update)
    - OwnerPropertyDetail: Property with traces and images inside owner detail
    - OwnerDetail: Result from GetOwnerById
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.application.dtos.property_dtos import ImageSummary, TraceResult
from src.domain.entities.owner import Owner
from src.domain.entities.property import Property
from src.domain.entities.property_image import PropertyImage
from src.domain.entities.property_trace import PropertyTrace


@dataclass(frozen=True, kw_only=True)
class OwnerPropertySummary:
    id: int
    name: str
    address: str
    price: Decimal
    code_internal: str
    year: int

    @classmethod
    def from_entity(cls, property_: Property) -> "OwnerPropertySummary":
        assert property_.id is not None
        return cls(
            id=property_.id,
            name=property_.name,
            address=property_.address,
            price=property_.price,
            code_internal=property_.code_internal,
            year=property_.year,
        )


@dataclass(frozen=True, kw_only=True)
class OwnerResult:
    """Owner with the summaries of its active properties.

    Attributes:
        id: Owner identifier.
        name: Full name.
        address: Postal address.
        photo: Base64 data URI or None.
        birthday: Date of birth.
        properties: Active properties ordered by id.
    """

    id: int
    name: str
    address: str
    photo: str | None
    birthday: date
    properties: list[OwnerPropertySummary] = field(default_factory=list)

    @classmethod
    def from_entity(cls, owner: Owner, properties: list[Property]) -> "OwnerResult":
        assert owner.id is not None
        return cls(
            id=owner.id,
            name=owner.name,
            address=owner.address,
            photo=owner.photo,
            birthday=owner.birthday,
            properties=[OwnerPropertySummary.from_entity(p) for p in properties],
        )


@dataclass(frozen=True, kw_only=True)
class OwnerPropertyDetail:
    id: int
    name: str
    address: str
    price: Decimal
    code_internal: str
    year: int
    traces: list[TraceResult] = field(default_factory=list)
    images: list[ImageSummary] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class OwnerDetail:
    """Owner with every active property, their traces and enabled images."""

    id: int
    name: str
    address: str
    photo: str | None
    birthday: date
    properties: list[OwnerPropertyDetail] = field(default_factory=list)

    @classmethod
    def from_entity(
        cls,
        owner: Owner,
        properties: list[Property],
        traces: dict[int, list[PropertyTrace]],
        images: dict[int, list[PropertyImage]],
    ) -> "OwnerDetail":
        assert owner.id is not None
        details: list[OwnerPropertyDetail] = []
        for property_ in properties:
            assert property_.id is not None
            details.append(
                OwnerPropertyDetail(
                    id=property_.id,
                    name=property_.name,
                    address=property_.address,
                    price=property_.price,
                    code_internal=property_.code_internal,
                    year=property_.year,
                    traces=[
                        TraceResult.from_entity(t) for t in traces.get(property_.id, [])
                    ],
                    images=[
                        ImageSummary.from_entity(i) for i in images.get(property_.id, [])
                    ],
                )
            )
        return cls(
            id=owner.id,
            name=owner.name,
            address=owner.address,
            photo=owner.photo,
            birthday=owner.birthday,
            properties=details,
        )
