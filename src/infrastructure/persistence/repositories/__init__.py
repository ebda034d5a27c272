"""Repository implementations (adapters for hexagonal architecture).

Concrete implementations of the repository protocols defined in the domain
layer. Repositories flush but never commit; see SqlAlchemyUnitOfWork.
"""

from src.infrastructure.persistence.repositories.owner_repository import OwnerRepository
from src.infrastructure.persistence.repositories.property_image_repository import (
    PropertyImageRepository,
)
from src.infrastructure.persistence.repositories.property_repository import (
    PropertyRepository,
)
from src.infrastructure.persistence.repositories.property_trace_repository import (
    PropertyTraceRepository,
)
from src.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from src.infrastructure.persistence.repositories.role_repository import RoleRepository
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "OwnerRepository",
    "PropertyImageRepository",
    "PropertyRepository",
    "PropertyTraceRepository",
    "RefreshTokenRepository",
    "RoleRepository",
    "UserRepository",
]
