"""API v1 routers.

Resources:
    /api/v1/auth        - Registration, login, token refresh and revocation
    /api/v1/owners      - Owners and their photos
    /api/v1/properties  - Properties, sales, images and listings
    /api/v1/health      - Database and cache health checks
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1 import auth, health, owners, properties

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(auth.router)
v1_router.include_router(owners.router)
v1_router.include_router(properties.router)
v1_router.include_router(health.router)

__all__ = [
    "v1_router",
]
