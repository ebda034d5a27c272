"""Owner resolution shared by property creation and sales.

Both workflows reference an owner by id and may carry inline owner data:

    owner exists,  inline data   -> refresh details (sales only), use owner
    owner exists,  no inline     -> use owner
    owner missing, inline data   -> create owner with the requested id
    owner missing, no inline     -> NOT_FOUND

Must run inside the caller's transaction so a created owner rolls back with
the rest of the work.
"""

from src.application.commands.property_commands import InlineOwner
from src.application.errors import ApplicationError, not_found
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.owner import Owner
from src.domain.protocols.unit_of_work import UnitOfWork


async def resolve_owner(
    uow: UnitOfWork,
    owner_id: int,
    inline: InlineOwner | None,
    refresh_existing: bool = False,
) -> Result[Owner, ApplicationError]:
    """Load, refresh or create the owner ``owner_id``.

    Args:
        uow: Unit of work of the running transaction.
        owner_id: Requested owner id.
        inline: Optional owner payload (already validated).
        refresh_existing: Overwrite an existing owner's details with ``inline``.

    Returns:
        Success(owner) in LOADED or DIRTY-then-written state,
        Failure(NOT_FOUND) when the owner is missing and no payload was given.
    """
    owner = await uow.owners.find_by_id(owner_id)
    if owner is not None:
        if inline is not None and refresh_existing:
            owner.update_details(
                name=inline.name.strip(),
                address=inline.address.strip(),
                birthday=inline.birthday,
                photo=inline.photo,
            )
            await uow.owners.update(owner)
        return Success(value=owner)

    if inline is None:
        return Failure(error=not_found("Owner", owner_id, ErrorCode.OWNER_NOT_FOUND))

    created = await uow.owners.add(
        Owner(
            id=owner_id,
            name=inline.name.strip(),
            address=inline.address.strip(),
            birthday=inline.birthday,
            photo=inline.photo,
        )
    )
    return Success(value=created)
