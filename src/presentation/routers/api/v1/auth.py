"""Authentication router.

Endpoints:
    POST /api/v1/auth/register       - Register and receive tokens (201)
    POST /api/v1/auth/login          - Login with username or email
    POST /api/v1/auth/refresh-token  - Rotate refresh token
    POST /api/v1/auth/revoke-token   - Revoke a refresh token (204, authenticated)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands.auth_commands import (
    LoginUser,
    RefreshAccessToken,
    RegisterUser,
    RevokeRefreshToken,
)
from src.application.cqrs.mediator import Mediator
from src.core.container.handler_factory import get_mediator
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import AuthenticatedUser
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    AuthResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"description": "Invalid credentials", "model": ProblemDetails}},
    summary="Login",
)
async def login(
    request: Request,
    data: LoginRequest,
    mediator: Mediator = Depends(get_mediator),
) -> AuthResponse | JSONResponse:
    """Authenticate with username or email.

    Previous refresh tokens of the user are revoked.
    """
    result = await mediator.send(
        LoginUser(username_or_email=data.username_or_email, password=data.password)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return AuthResponse.from_dto(result.value)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    responses={
        400: {"description": "Validation error", "model": ProblemDetails},
        409: {"description": "Username or email taken", "model": ProblemDetails},
    },
    summary="Register",
)
async def register(
    request: Request,
    data: RegisterRequest,
    mediator: Mediator = Depends(get_mediator),
) -> AuthResponse | JSONResponse:
    result = await mediator.send(
        RegisterUser(
            username=data.username,
            email=data.email,
            password=data.password,
            first_name=data.first_name,
            last_name=data.last_name,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return AuthResponse.from_dto(result.value)


@router.post(
    "/refresh-token",
    response_model=AuthResponse,
    responses={401: {"description": "Invalid or expired token", "model": ProblemDetails}},
    summary="Refresh access token",
)
async def refresh_token(
    request: Request,
    data: RefreshTokenRequest,
    mediator: Mediator = Depends(get_mediator),
) -> AuthResponse | JSONResponse:
    """Exchange a refresh token for a new token pair (old one is revoked)."""
    result = await mediator.send(RefreshAccessToken(refresh_token=data.token))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return AuthResponse.from_dto(result.value)


@router.post(
    "/revoke-token",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        401: {"description": "Not authenticated", "model": ProblemDetails},
        404: {"description": "Unknown or inactive token", "model": ProblemDetails},
    },
    summary="Revoke refresh token",
)
async def revoke_token(
    request: Request,
    data: RefreshTokenRequest,
    current_user: AuthenticatedUser,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    result = await mediator.send(
        RevokeRefreshToken(refresh_token=data.token, user_id=current_user.user_id)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
