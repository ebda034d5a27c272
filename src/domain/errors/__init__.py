"""Domain errors package.

Usage:
    from src.domain.errors import PropertyError, OwnerError, AuthError
"""

from src.domain.errors.authentication_error import AuthError
from src.domain.errors.owner_error import OwnerError
from src.domain.errors.property_error import PropertyError

__all__ = [
    "AuthError",
    "OwnerError",
    "PropertyError",
]
