"""Domain enums.

Usage:
    from src.domain.enums import EntityState, UserRole
"""

from src.domain.enums.entity_state import EntityState
from src.domain.enums.user_role import UserRole

__all__ = ["EntityState", "UserRole"]
