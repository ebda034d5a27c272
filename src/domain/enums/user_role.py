"""Roles seeded into the roles table.

Role names are stored verbatim in the database and embedded in the JWT
``roles`` claim.

Usage:
    from src.domain.enums import UserRole

    if UserRole.ADMIN.value in current_user.roles:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """Roles available to users.

    ADMIN:
        Seeded administrator account.
    USER:
        Default role assigned on registration.
    AGENT:
        Real-estate agent managing listings.
    """

    ADMIN = "Admin"
    USER = "User"
    AGENT = "Agent"

    @property
    def description(self) -> str:
        """Human-readable description stored with the seeded role."""
        return _ROLE_DESCRIPTIONS[self]

    @classmethod
    def values(cls) -> list[str]:
        """Get all role names as strings."""
        return [role.value for role in cls]


_ROLE_DESCRIPTIONS: dict[UserRole, str] = {
    UserRole.ADMIN: "Administrator with full access",
    UserRole.USER: "Regular user",
    UserRole.AGENT: "Real estate agent",
}
