"""Owner commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). Handlers validate field rules and return Result types.
"""

from dataclasses import dataclass
from datetime import date

from src.domain.value_objects.image_data import ImageUpload


@dataclass(frozen=True, kw_only=True)
class CreateOwner:
    """Create an owner.

    Attributes:
        name: Full name (required, max 100).
        address: Postal address (max 200).
        birthday: Date of birth (required, not in the future).
        photo: Optional base64 data URI of a jpeg/png/gif image.
        owner_id: Explicit id to use; None lets the database choose.

    Example:
        >>> command = CreateOwner(name="Ana", address="Calle 1", birthday=date(1980, 1, 1))
        >>> result = await mediator.send(command)
    """

    name: str
    address: str
    birthday: date
    photo: str | None = None
    owner_id: int | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateOwnerPhoto:
    """Replace an owner's photo with an uploaded image.

    Attributes:
        owner_id: Owner to update.
        upload: Uploaded file (jpeg/png/gif, at most 5 MB).
    """

    owner_id: int
    upload: ImageUpload
