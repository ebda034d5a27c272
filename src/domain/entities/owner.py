"""Owner domain entity.

Pure business logic, no framework dependencies.

An owner holds zero or more properties. Owners are never hard-deleted;
``is_active`` hides them from listings.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from src.domain.enums import EntityState

OWNER_NAME_MAX_LENGTH = 100
OWNER_ADDRESS_MAX_LENGTH = 200


@dataclass
class Owner:
    """Owner of one or more properties.

    Business Rules:
        - Name is required (max 100 characters)
        - Address is optional (max 200 characters)
        - Photo is stored as a base64 data URI
        - Birthday is required

    Attributes:
        id: Owner identifier. None until persisted unless chosen by the caller.
        name: Full name.
        address: Postal address.
        birthday: Date of birth.
        photo: Base64 data URI (``data:image/png;base64,...``) or None.
        is_active: Soft-delete flag.
        created_at: Set by the database on insert.
        updated_at: Set by the database on update.
        state: Persistence state (see EntityState).

    Example:
        >>> owner = Owner(id=None, name="Ana", address="Calle 1", birthday=date(1980, 1, 1))
        >>> owner.change_photo("data:image/png;base64,AAAA")
        >>> owner.photo
        'data:image/png;base64,AAAA'
    """

    id: int | None
    name: str
    address: str
    birthday: date
    photo: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    state: EntityState = field(default=EntityState.NEW, compare=False)

    def update_details(
        self,
        name: str,
        address: str,
        birthday: date,
        photo: str | None = None,
    ) -> None:
        """Replace contact details, keeping the current photo when none is given."""
        self.name = name
        self.address = address
        self.birthday = birthday
        if photo:
            self.photo = photo
        self._mark_dirty()

    def change_photo(self, photo: str) -> None:
        """Replace the owner's photo with a validated data URI."""
        self.photo = photo
        self._mark_dirty()

    def mark_loaded(self) -> None:
        """Record that the entity now matches its stored row."""
        self.state = EntityState.LOADED

    def _mark_dirty(self) -> None:
        if self.state is EntityState.LOADED:
            self.state = EntityState.DIRTY
