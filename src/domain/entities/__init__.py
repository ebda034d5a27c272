"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.owner import Owner
from src.domain.entities.property import Property, PropertyChanges
from src.domain.entities.property_image import PropertyImage
from src.domain.entities.property_trace import PropertyTrace
from src.domain.entities.refresh_token import RefreshToken
from src.domain.entities.user import User

__all__ = [
    "Owner",
    "Property",
    "PropertyChanges",
    "PropertyImage",
    "PropertyTrace",
    "RefreshToken",
    "User",
]
