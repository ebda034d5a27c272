"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetOwnerById, ListProperties).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.owner_queries import GetAllOwners, GetOwnerById
from src.application.queries.property_queries import (
    GetPropertyById,
    GetPropertyImage,
    ListProperties,
)

__all__ = [
    # Owner queries
    "GetAllOwners",
    "GetOwnerById",
    # Property queries
    "GetPropertyById",
    "GetPropertyImage",
    "ListProperties",
]
