"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and should not be imported by the domain layer.

Models Organization:
    - owner.py: Owners
    - property.py: Properties
    - property_trace.py: Price/ownership history (append-only)
    - property_image.py: Inline property images
    - user.py: Users
    - role.py: Roles and the user_roles association table
    - refresh_token.py: Refresh tokens

Note:
    Domain entities (dataclasses) live in src/domain/entities/ and are mapped
    to and from these models by the repositories.
"""

from src.infrastructure.persistence.models.owner import Owner
from src.infrastructure.persistence.models.property import Property
from src.infrastructure.persistence.models.property_image import PropertyImage
from src.infrastructure.persistence.models.property_trace import PropertyTrace
from src.infrastructure.persistence.models.refresh_token import RefreshToken
from src.infrastructure.persistence.models.role import Role, user_roles
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Owner",
    "Property",
    "PropertyImage",
    "PropertyTrace",
    "RefreshToken",
    "Role",
    "User",
    "user_roles",
]
