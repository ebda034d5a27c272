"""Owner request and response schemas.

Reference shapes:
    POST /api/v1/owners            CreateOwnerRequest -> OwnerResponse (201)
    GET  /api/v1/owners            -> list[OwnerResponse]
    GET  /api/v1/owners/{id}       -> OwnerDetailResponse
    POST /api/v1/owners/{id}/photo multipart file -> OwnerResponse
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos.owner_dtos import OwnerDetail, OwnerResult
from src.domain.types import OwnerAddress, OwnerName, PhotoDataUri, PositiveId
from src.schemas.property_schemas import ImageSummaryResponse, TraceResponse


class CreateOwnerRequest(BaseModel):
    """Request schema for owner creation.

    ``id`` is optional; when given it must not exist yet.
    """

    id: PositiveId | None = Field(None, description="Explicit owner id")
    name: OwnerName
    address: OwnerAddress
    photo: PhotoDataUri | None = None
    birthday: date = Field(..., description="Date of birth", examples=["1985-04-12"])


class OwnerPropertySummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    price: Decimal
    code_internal: str
    year: int


class OwnerResponse(BaseModel):
    """Owner with property summaries."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    photo: str | None = Field(None, description="Base64 data URI")
    birthday: date
    properties: list[OwnerPropertySummaryResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: OwnerResult) -> "OwnerResponse":
        return cls.model_validate(dto)


class OwnerPropertyDetailResponse(OwnerPropertySummaryResponse):
    traces: list[TraceResponse] = Field(default_factory=list)
    images: list[ImageSummaryResponse] = Field(default_factory=list)


class OwnerDetailResponse(BaseModel):
    """Owner with every active property, its traces and enabled images."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    photo: str | None = None
    birthday: date
    properties: list[OwnerPropertyDetailResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: OwnerDetail) -> "OwnerDetailResponse":
        return cls.model_validate(dto)
