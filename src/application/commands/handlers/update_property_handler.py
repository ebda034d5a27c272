"""UpdateProperty command handler.

Partial update inside a retryable transaction. Omitted or blank text fields
stay unchanged. A changed price appends a "Price Update" trace; updates that
leave the price alone append nothing.
After commit the property, its owner and every listing page are
invalidated.
"""

from datetime import UTC, datetime

from src.application.commands.field_checks import first_invalid_field
from src.application.commands.property_commands import UpdateProperty
from src.application.dtos.property_dtos import UpdatePropertyResult
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    conflict,
    from_property_error,
    not_found,
)
from src.application.services.cache_invalidation import (
    CacheInvalidator,
    OwnerTag,
    PropertiesListTag,
    PropertyTag,
)
from src.application.services.transactions import RetryPolicy, run_in_transaction
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.property import PropertyChanges, to_money
from src.domain.errors import PropertyError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work import UnitOfWork
from src.domain.validators import (
    validate_code_internal,
    validate_price,
    validate_property_address,
    validate_property_name,
    validate_year,
)


def _changed_text(value: str | None) -> str | None:
    """Stripped value, or None (unchanged) when blank."""
    if value is None or not value.strip():
        return None
    return value.strip()


class UpdatePropertyHandler:
    """Handler for UpdateProperty command."""

    def __init__(
        self,
        uow: UnitOfWork,
        retry_policy: RetryPolicy,
        cache_invalidator: CacheInvalidator,
        logger: LoggerProtocol,
    ) -> None:
        self._uow = uow
        self._retry_policy = retry_policy
        self._invalidator = cache_invalidator
        self._logger = logger

    async def handle(
        self, cmd: UpdateProperty
    ) -> Result[UpdatePropertyResult, ApplicationError]:
        """Handle UpdateProperty command.

        Returns:
            Success(UpdatePropertyResult): Update committed.
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED (no fields or
                a field rule), NOT_FOUND, CONFLICT (code_internal taken),
                INVALID_OPERATION (inactive) or COMMAND_EXECUTION_FAILED.
        """
        changes = PropertyChanges(
            name=_changed_text(cmd.name),
            address=_changed_text(cmd.address),
            price=cmd.price,
            code_internal=_changed_text(cmd.code_internal),
            year=cmd.year,
        )
        if changes.is_empty():
            return Failure(error=from_property_error(PropertyError.NO_CHANGES))
        invalid = first_invalid_field(
            ("name", validate_property_name, changes.name),
            ("address", validate_property_address, changes.address),
            ("price", validate_price, cmd.price),
            ("code_internal", validate_code_internal, changes.code_internal),
            ("year", validate_year, cmd.year),
        )
        if invalid is not None:
            return Failure(error=invalid)

        async def work(
            uow: UnitOfWork,
        ) -> Result[tuple[UpdatePropertyResult, int], ApplicationError]:
            property_ = await uow.properties.find_by_id(cmd.property_id)
            if property_ is None:
                return Failure(
                    error=not_found("Property", cmd.property_id, ErrorCode.PROPERTY_NOT_FOUND)
                )

            if (
                changes.code_internal is not None
                and changes.code_internal != property_.code_internal
                and await uow.properties.code_exists(
                    changes.code_internal, exclude_id=cmd.property_id
                )
            ):
                return Failure(
                    error=conflict(
                        "Property",
                        "code_internal",
                        f"Property with code '{changes.code_internal}' already exists",
                        ErrorCode.PROPERTY_ALREADY_EXISTS,
                    )
                )

            old_price = to_money(property_.price)
            transition = property_.apply_update(changes, datetime.now(UTC))
            if isinstance(transition, Failure):
                return Failure(error=from_property_error(transition.error))
            trace = transition.value

            await uow.properties.update(property_)
            if trace is not None:
                await uow.traces.add(trace)
            return Success(
                value=(
                    UpdatePropertyResult(
                        id=cmd.property_id,
                        old_price=old_price,
                        new_price=to_money(property_.price),
                        price_changed=trace is not None,
                    ),
                    property_.owner_id,
                )
            )

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error(
                "property_update_failed", error=e, property_id=cmd.property_id
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to update property",
                )
            )

        if isinstance(result, Failure):
            return result
        update, owner_id = result.value
        await self._invalidator.invalidate(
            PropertyTag(cmd.property_id),
            OwnerTag(owner_id),
            PropertiesListTag(),
        )
        self._logger.info(
            "property_updated",
            property_id=cmd.property_id,
            price_changed=update.price_changed,
        )
        return Success(value=update)