"""Database persistence infrastructure.

- Base model and mixins for all database entities
- Database engine and session management
- Repository implementations and the Unit of Work
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.transient_errors import is_transient_database_error
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "BaseModel",
    "Database",
    "SqlAlchemyUnitOfWork",
    "is_transient_database_error",
]
