"""Field checks shared by command handlers.

Handlers receive plain dataclass commands (routers are not the only
callers), so they re-run the domain validators and turn the first
ValueError into a COMMAND_VALIDATION_FAILED error.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from src.application.commands.property_commands import InlineOwner
from src.application.errors import ApplicationError, validation_failed
from src.domain.validators import (
    validate_owner_address,
    validate_owner_name,
    validate_photo_data_uri,
)

type FieldCheck = tuple[str, Callable[[Any], Any], Any]


def first_invalid_field(*checks: FieldCheck) -> ApplicationError | None:
    """Run ``(field, validator, value)`` checks in order, skipping None values.

    Returns:
        Validation error of the first failing field, or None if all pass.

    Example:
        >>> first_invalid_field(("year", validate_year, 1700))
        ApplicationError(code=COMMAND_VALIDATION_FAILED, ...)
    """
    for field, validator, value in checks:
        if value is None:
            continue
        try:
            validator(value)
        except ValueError as e:
            return validation_failed(str(e), field=field)
    return None


def invalid_inline_owner(owner: InlineOwner | None, field_prefix: str) -> ApplicationError | None:
    """Validate inline owner data nested under ``field_prefix`` (e.g. "new_owner")."""
    if owner is None:
        return None
    invalid = first_invalid_field(
        (f"{field_prefix}.name", validate_owner_name, owner.name),
        (f"{field_prefix}.address", validate_owner_address, owner.address),
        (f"{field_prefix}.photo", validate_photo_data_uri, owner.photo),
    )
    if invalid is not None:
        return invalid
    if owner.birthday > datetime.now(UTC).date():
        return validation_failed(
            "Birthday cannot be in the future", field=f"{field_prefix}.birthday"
        )
    return None
