"""Properties resource router (authenticated).

Endpoints:
    GET    /api/v1/properties                    - Filtered, paginated listing
    GET    /api/v1/properties/{id}               - Property detail
    POST   /api/v1/properties                    - Create property (201)
    PUT    /api/v1/properties/{id}               - Partial update
    POST   /api/v1/properties/{id}/sell          - Sell to a new owner
    POST   /api/v1/properties/{id}/images        - Upload images (multipart ``images``)
    GET    /api/v1/properties/images/{image_id}  - Image payload
    DELETE /api/v1/properties/images/{image_id}  - Soft-delete image (204)
"""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, File, Path, Query, Request, UploadFile, status
from fastapi.responses import JSONResponse, Response

from src.application.commands.property_commands import (
    DEFAULT_SALE_NOTES,
    AddPropertyImages,
    CreateProperty,
    DeletePropertyImage,
    InlineOwner,
    SellProperty,
    UpdateProperty,
)
from src.application.cqrs.mediator import Mediator
from src.application.queries.property_queries import (
    GetPropertyById,
    GetPropertyImage,
    ListProperties,
)
from src.core.container.handler_factory import get_mediator
from src.core.result import Failure
from src.domain.value_objects.image_data import ImageUpload
from src.domain.value_objects.property_filter import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, PropertyFilter
from src.presentation.routers.api.middleware.auth_dependencies import get_current_user
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.property_schemas import (
    AddImagesResponse,
    CreatePropertyRequest,
    ImageResponse,
    InlineOwnerRequest,
    PropertiesListResponse,
    PropertyResponse,
    SaleResponse,
    SellPropertyRequest,
    UpdatePropertyRequest,
    UpdatePropertyResponse,
)

router = APIRouter(
    prefix="/properties",
    tags=["Properties"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not authenticated", "model": ProblemDetails}},
)

PropertyId = Annotated[int, Path(gt=0, description="Property identifier")]
ImageId = Annotated[int, Path(gt=0, description="Image identifier")]


def _inline_owner(data: InlineOwnerRequest | None) -> InlineOwner | None:
    if data is None:
        return None
    return InlineOwner(
        name=data.name,
        address=data.address,
        birthday=data.birthday,
        photo=data.photo,
    )


async def _to_upload(file: UploadFile) -> ImageUpload:
    return ImageUpload(
        filename=file.filename or "",
        content_type=file.content_type or "",
        content=await file.read(),
    )


# =============================================================================
# Images
# =============================================================================


@router.get(
    "/images/{image_id}",
    response_model=ImageResponse,
    responses={404: {"description": "Image not found", "model": ProblemDetails}},
    summary="Get image",
)
async def get_property_image(
    request: Request,
    image_id: ImageId,
    mediator: Mediator = Depends(get_mediator),
) -> ImageResponse | JSONResponse:
    result = await mediator.send(GetPropertyImage(image_id=image_id))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return ImageResponse.from_dto(result.value)


@router.delete(
    "/images/{image_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={404: {"description": "Image not found", "model": ProblemDetails}},
    summary="Delete image",
)
async def delete_property_image(
    request: Request,
    image_id: ImageId,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    result = await mediator.send(DeletePropertyImage(image_id=image_id))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{property_id}/images",
    response_model=AddImagesResponse,
    responses={
        400: {"description": "No valid image", "model": ProblemDetails},
        404: {"description": "Property not found", "model": ProblemDetails},
    },
    summary="Upload images",
)
async def upload_property_images(
    request: Request,
    property_id: PropertyId,
    images: Annotated[list[UploadFile], File(description=".jpg, .jpeg, .png or .gif files")],
    mediator: Mediator = Depends(get_mediator),
) -> AddImagesResponse | JSONResponse:
    """Attach images; empty files and other extensions are skipped."""
    uploads = [await _to_upload(image) for image in images]
    result = await mediator.send(AddPropertyImages(property_id=property_id, uploads=uploads))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return AddImagesResponse.from_dto(result.value)


# =============================================================================
# Properties
# =============================================================================


@router.get("", response_model=PropertiesListResponse, summary="List properties")
async def list_properties(
    request: Request,
    name: Annotated[str | None, Query(max_length=100, description="Name contains (case-insensitive)")] = None,
    min_price: Annotated[Decimal | None, Query(ge=0)] = None,
    max_price: Annotated[Decimal | None, Query(ge=0)] = None,
    year: Annotated[int | None, Query(ge=1800, le=2100)] = None,
    owner_id: Annotated[int | None, Query(gt=0)] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    mediator: Mediator = Depends(get_mediator),
) -> PropertiesListResponse | JSONResponse:
    """Active properties ordered by id, one page at a time."""
    criteria = PropertyFilter(
        name=name or None,
        min_price=min_price,
        max_price=max_price,
        year=year,
        owner_id=owner_id,
        page=page,
        page_size=page_size,
    )
    result = await mediator.send(ListProperties(criteria=criteria))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return PropertiesListResponse.from_dto(result.value)


@router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    responses={404: {"description": "Property not found", "model": ProblemDetails}},
    summary="Get property",
)
async def get_property(
    request: Request,
    property_id: PropertyId,
    mediator: Mediator = Depends(get_mediator),
) -> PropertyResponse | JSONResponse:
    result = await mediator.send(GetPropertyById(property_id=property_id))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return PropertyResponse.from_dto(result.value)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PropertyResponse,
    responses={
        400: {"description": "Validation error", "model": ProblemDetails},
        404: {"description": "Owner not found", "model": ProblemDetails},
        409: {"description": "Duplicate internal code", "model": ProblemDetails},
    },
    summary="Create property",
)
async def create_property(
    request: Request,
    data: CreatePropertyRequest,
    mediator: Mediator = Depends(get_mediator),
) -> PropertyResponse | JSONResponse:
    result = await mediator.send(
        CreateProperty(
            name=data.name,
            address=data.address,
            price=data.price,
            code_internal=data.code_internal,
            year=data.year,
            owner_id=data.owner_id,
            owner=_inline_owner(data.owner),
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return PropertyResponse.from_dto(result.value)


@router.put(
    "/{property_id}",
    response_model=UpdatePropertyResponse,
    responses={
        400: {"description": "Validation error", "model": ProblemDetails},
        404: {"description": "Property not found", "model": ProblemDetails},
        409: {"description": "Duplicate internal code", "model": ProblemDetails},
    },
    summary="Update property",
)
async def update_property(
    request: Request,
    property_id: PropertyId,
    data: UpdatePropertyRequest,
    mediator: Mediator = Depends(get_mediator),
) -> UpdatePropertyResponse | JSONResponse:
    """Apply a partial update. A price change appends a "Price Update" trace."""
    result = await mediator.send(
        UpdateProperty(
            property_id=property_id,
            name=data.name,
            address=data.address,
            price=data.price,
            code_internal=data.code_internal,
            year=data.year,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return UpdatePropertyResponse.from_dto(result.value)


@router.post(
    "/{property_id}/sell",
    response_model=SaleResponse,
    responses={
        400: {"description": "Invalid sale", "model": ProblemDetails},
        404: {"description": "Property or buyer not found", "model": ProblemDetails},
    },
    summary="Sell property",
)
async def sell_property(
    request: Request,
    property_id: PropertyId,
    data: SellPropertyRequest,
    mediator: Mediator = Depends(get_mediator),
) -> SaleResponse | JSONResponse:
    """Transfer ownership and record a "Sold to {name}" trace with tax."""
    result = await mediator.send(
        SellProperty(
            property_id=property_id,
            new_owner_id=data.new_owner_id,
            sale_price=data.sale_price,
            tax_percentage=data.tax_percentage,
            new_owner=_inline_owner(data.new_owner),
            notes=data.notes or DEFAULT_SALE_NOTES,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return SaleResponse.from_dto(result.value)
