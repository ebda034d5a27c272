"""Property request and response schemas.

Includes:
- Request schemas (client -> API)
- Response schemas (API -> client)
- DTO-to-schema conversion methods
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.application.dtos.property_dtos import (
    AddedImages,
    ImageDetail,
    PropertyDetail,
    PropertyPage,
    SaleResult,
    UpdatePropertyResult,
)
from src.domain.types import (
    CodeInternal,
    ConstructionYear,
    OwnerAddress,
    OwnerName,
    PhotoDataUri,
    PositiveId,
    Price,
    PropertyAddress,
    PropertyName,
    SalePrice,
    TaxPercentage,
)


# =============================================================================
# Request Schemas
# =============================================================================


class InlineOwnerRequest(BaseModel):
    """Owner data supplied together with a property or a sale."""

    name: OwnerName
    address: OwnerAddress
    photo: PhotoDataUri | None = None
    birthday: date


class CreatePropertyRequest(BaseModel):
    """Request schema for property creation.

    ``owner`` is used only when ``owner_id`` does not exist yet.
    """

    name: PropertyName
    address: PropertyAddress
    price: Price
    code_internal: CodeInternal
    year: ConstructionYear
    owner_id: PositiveId
    owner: InlineOwnerRequest | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Casa Campestre",
                "address": "Km 5 via La Calera",
                "price": "350000.00",
                "code_internal": "PROP-001",
                "year": 2015,
                "owner_id": 1,
            }
        }
    )


class UpdatePropertyRequest(BaseModel):
    """Partial update; omitted or blank fields stay unchanged."""

    name: PropertyName | None = None
    address: PropertyAddress | None = None
    price: Price | None = None
    code_internal: CodeInternal | None = None
    year: ConstructionYear | None = None

    @field_validator("name", "address", "code_internal", mode="before")
    @classmethod
    def _blank_as_unchanged(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _require_one_field(self) -> "UpdatePropertyRequest":
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided")
        return self


class SellPropertyRequest(BaseModel):
    """Request schema for a sale.

    ``new_owner`` creates the buyer when ``new_owner_id`` does not exist,
    or refreshes the existing buyer's details.
    """

    new_owner_id: PositiveId
    sale_price: SalePrice
    tax_percentage: TaxPercentage
    new_owner: InlineOwnerRequest | None = None
    notes: str | None = Field(None, max_length=500, description="Free-text sale notes")


# =============================================================================
# Response Schemas
# =============================================================================


class TraceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(..., examples=["Sold to Ana Gomez"])
    date_sale: datetime
    value: Decimal
    tax: Decimal


class ImageSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    enabled: bool


class ImageResponse(BaseModel):
    """Stored image, ``file`` is a base64 data URI."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    property_id: int
    file: str
    enabled: bool

    @classmethod
    def from_dto(cls, dto: ImageDetail) -> "ImageResponse":
        return cls.model_validate(dto)


class PropertyOwnerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    photo: str | None = None
    birthday: date


class PropertyResponse(BaseModel):
    """Property detail with owner, traces and enabled images."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    price: Decimal
    code_internal: str
    year: int
    owner_id: int
    owner: PropertyOwnerResponse | None = None
    traces: list[TraceResponse] = Field(default_factory=list)
    images: list[ImageSummaryResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: PropertyDetail) -> "PropertyResponse":
        return cls.model_validate(dto)


class PropertyListItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str
    price: Decimal
    year: int
    code_internal: str
    owner_id: int
    owner_name: str
    image_count: int
    last_trace: TraceResponse | None = None


class PropertiesListResponse(BaseModel):
    """One page of the filtered property listing."""

    properties: list[PropertyListItemResponse]
    total_count: int = Field(..., description="Matches across all pages")
    page_number: int
    page_size: int
    total_pages: int

    @classmethod
    def from_dto(cls, dto: PropertyPage) -> "PropertiesListResponse":
        return cls(
            properties=[PropertyListItemResponse.model_validate(item) for item in dto.items],
            total_count=dto.total_count,
            page_number=dto.page_number,
            page_size=dto.page_size,
            total_pages=dto.total_pages,
        )


class UpdatePropertyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    old_price: Decimal
    new_price: Decimal
    price_changed: bool
    message: str = "Property updated successfully"

    @classmethod
    def from_dto(cls, dto: UpdatePropertyResult) -> "UpdatePropertyResponse":
        return cls.model_validate(dto)


class SaleResponse(BaseModel):
    """Outcome of a sale."""

    model_config = ConfigDict(from_attributes=True)

    property_id: int
    previous_owner_id: int
    new_owner_id: int
    sale_price: Decimal
    tax: Decimal = Field(..., description="sale_price * tax_percentage / 100")
    sale_date: datetime
    message: str = "Property sold successfully"

    @classmethod
    def from_dto(cls, dto: SaleResult) -> "SaleResponse":
        return cls.model_validate(dto)


class AddImagesResponse(BaseModel):
    message: str
    image_ids: list[int]

    @classmethod
    def from_dto(cls, dto: AddedImages) -> "AddImagesResponse":
        message = f"{len(dto.image_ids)} image(s) uploaded successfully"
        if dto.skipped:
            message += f", {dto.skipped} skipped"
        return cls(message=message, image_ids=dto.image_ids)
