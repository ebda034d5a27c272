"""Owner queries (CQRS read operations).

Queries represent requests for owner data. They are immutable dataclasses
with question-like names. Queries NEVER change state.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetAllOwners:
    """List every active owner with summaries of its active properties.

    Cached under ``{prefix}:owners:all`` (list policy).
    """


@dataclass(frozen=True, kw_only=True)
class GetOwnerById:
    """Get one owner with properties, their traces and enabled images.

    Attributes:
        owner_id: Owner identifier.
    """

    owner_id: int
