"""Owners resource router (authenticated).

Endpoints:
    GET  /api/v1/owners             - Active owners with property summaries
    GET  /api/v1/owners/{id}        - Owner with properties, traces and images
    POST /api/v1/owners             - Create owner (201)
    POST /api/v1/owners/{id}/photo  - Upload owner photo (multipart ``file``)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Path, Request, UploadFile, status
from fastapi.responses import JSONResponse

from src.application.commands.owner_commands import CreateOwner, UpdateOwnerPhoto
from src.application.cqrs.mediator import Mediator
from src.application.queries.owner_queries import GetAllOwners, GetOwnerById
from src.core.container.handler_factory import get_mediator
from src.core.result import Failure
from src.domain.value_objects.image_data import ImageUpload
from src.presentation.routers.api.middleware.auth_dependencies import get_current_user
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.owner_schemas import (
    CreateOwnerRequest,
    OwnerDetailResponse,
    OwnerResponse,
)

router = APIRouter(
    prefix="/owners",
    tags=["Owners"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Not authenticated", "model": ProblemDetails}},
)

OwnerId = Annotated[int, Path(gt=0, description="Owner identifier")]


@router.get("", response_model=list[OwnerResponse], summary="List owners")
async def list_owners(
    request: Request,
    mediator: Mediator = Depends(get_mediator),
) -> list[OwnerResponse] | JSONResponse:
    result = await mediator.send(GetAllOwners())
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return [OwnerResponse.from_dto(owner) for owner in result.value]


@router.get(
    "/{owner_id}",
    response_model=OwnerDetailResponse,
    responses={404: {"description": "Owner not found", "model": ProblemDetails}},
    summary="Get owner",
)
async def get_owner(
    request: Request,
    owner_id: OwnerId,
    mediator: Mediator = Depends(get_mediator),
) -> OwnerDetailResponse | JSONResponse:
    result = await mediator.send(GetOwnerById(owner_id=owner_id))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return OwnerDetailResponse.from_dto(result.value)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=OwnerResponse,
    responses={
        400: {"description": "Validation error", "model": ProblemDetails},
        409: {"description": "Owner id already exists", "model": ProblemDetails},
    },
    summary="Create owner",
)
async def create_owner(
    request: Request,
    data: CreateOwnerRequest,
    mediator: Mediator = Depends(get_mediator),
) -> OwnerResponse | JSONResponse:
    result = await mediator.send(
        CreateOwner(
            owner_id=data.id,
            name=data.name,
            address=data.address,
            photo=data.photo,
            birthday=data.birthday,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return OwnerResponse.from_dto(result.value)


@router.post(
    "/{owner_id}/photo",
    response_model=OwnerResponse,
    responses={
        400: {"description": "Invalid image", "model": ProblemDetails},
        404: {"description": "Owner not found", "model": ProblemDetails},
    },
    summary="Upload owner photo",
)
async def upload_owner_photo(
    request: Request,
    owner_id: OwnerId,
    file: Annotated[UploadFile, File(description="JPEG, PNG or GIF, at most 5 MB")],
    mediator: Mediator = Depends(get_mediator),
) -> OwnerResponse | JSONResponse:
    """Store the uploaded image as the owner's photo (base64 data URI)."""
    upload = ImageUpload(
        filename=file.filename or "",
        content_type=file.content_type or "",
        content=await file.read(),
    )
    result = await mediator.send(UpdateOwnerPhoto(owner_id=owner_id, upload=upload))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return OwnerResponse.from_dto(result.value)
