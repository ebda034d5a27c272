"""PropertyImage domain entity.

Images are stored inline as base64 data URIs and soft-deleted through
``enabled``.
"""

from dataclasses import dataclass, field

from src.domain.enums import EntityState


@dataclass
class PropertyImage:
    """Image attached to a property.

    Attributes:
        id: Image identifier (None until persisted).
        property_id: Owning property.
        file: ``data:<content-type>;base64,<payload>`` string.
        enabled: False once the image has been deleted.
        state: Persistence state (see EntityState).
    """

    id: int | None
    property_id: int
    file: str
    enabled: bool = True
    state: EntityState = field(default=EntityState.NEW, compare=False)

    def disable(self) -> bool:
        """Soft-delete the image.

        Returns:
            True if the image was enabled before the call.
        """
        if not self.enabled:
            return False
        self.enabled = False
        if self.state is EntityState.LOADED:
            self.state = EntityState.DIRTY
        return True

    def mark_loaded(self) -> None:
        self.state = EntityState.LOADED
