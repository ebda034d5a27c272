"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import CacheProtocol, UnitOfWork
"""

# Service protocols
from src.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.refresh_token_service_protocol import RefreshTokenServiceProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.owner_repository import OwnerRepository
from src.domain.protocols.property_image_repository import PropertyImageRepository
from src.domain.protocols.property_repository import PropertyRepository
from src.domain.protocols.property_trace_repository import PropertyTraceRepository
from src.domain.protocols.refresh_token_repository import RefreshTokenRepository
from src.domain.protocols.role_repository import RoleRepository
from src.domain.protocols.unit_of_work import UnitOfWork
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "CacheKeysProtocol",
    "CacheProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RefreshTokenServiceProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "OwnerRepository",
    "PropertyImageRepository",
    "PropertyRepository",
    "PropertyTraceRepository",
    "RefreshTokenRepository",
    "RoleRepository",
    "UnitOfWork",
    "UserRepository",
]
