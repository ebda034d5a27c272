"""CreateProperty command handler.

Creates the property with its initial "Property Created" trace. When the
referenced owner does not exist, the inline owner payload (if any) creates
it with the requested id inside the same transaction.
"""

from datetime import UTC, datetime

from src.application.commands.field_checks import first_invalid_field, invalid_inline_owner
from src.application.commands.property_commands import CreateProperty
from src.application.dtos.property_dtos import PropertyDetail
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    conflict,
    from_property_error,
)
from src.application.services.cache_invalidation import (
    CacheInvalidator,
    OwnersListTag,
    OwnerTag,
    PropertiesListTag,
    PropertyTag,
)
from src.application.services.owner_resolution import resolve_owner
from src.application.services.transactions import RetryPolicy, run_in_transaction
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.property import Property, to_money
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work import UnitOfWork
from src.domain.validators import (
    validate_code_internal,
    validate_positive_id,
    validate_price,
    validate_property_address,
    validate_property_name,
    validate_year,
)


class CreatePropertyHandler:
    """Handler for CreateProperty command."""

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

    async def handle(self, cmd: CreateProperty) -> Result[PropertyDetail, ApplicationError]:
        """Handle CreateProperty command.

        Returns:
            Success(PropertyDetail): Property, owner and creation trace.
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED, CONFLICT
                (duplicate code_internal), NOT_FOUND (owner missing without
                inline data) or COMMAND_EXECUTION_FAILED.
        """
        invalid = first_invalid_field(
            ("name", validate_property_name, cmd.name),
            ("address", validate_property_address, cmd.address),
            ("price", validate_price, cmd.price),
            ("code_internal", validate_code_internal, cmd.code_internal),
            ("year", validate_year, cmd.year),
            ("owner_id", validate_positive_id, cmd.owner_id),
        ) or invalid_inline_owner(cmd.owner, "owner")
        if invalid is not None:
            return Failure(error=invalid)
        code_internal = cmd.code_internal.strip()

        async def work(uow: UnitOfWork) -> Result[PropertyDetail, ApplicationError]:
            if await uow.properties.code_exists(code_internal):
                return Failure(
                    error=conflict(
                        "Property",
                        "code_internal",
                        f"Property with code '{code_internal}' already exists",
                        ErrorCode.PROPERTY_ALREADY_EXISTS,
                    )
                )

            owner_result = await resolve_owner(uow, cmd.owner_id, cmd.owner)
            if isinstance(owner_result, Failure):
                return owner_result
            owner = owner_result.value

            property_ = await uow.properties.add(
                Property(
                    id=None,
                    name=cmd.name.strip(),
                    address=cmd.address.strip(),
                    price=to_money(cmd.price),
                    code_internal=code_internal,
                    year=cmd.year,
                    owner_id=cmd.owner_id,
                )
            )
            creation = property_.record_creation(datetime.now(UTC))
            if isinstance(creation, Failure):
                return Failure(error=from_property_error(creation.error))
            trace = await uow.traces.add(creation.value)
            return Success(
                value=PropertyDetail.from_entity(property_, owner, [trace], [])
            )

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error(
                "property_create_failed", error=e, code_internal=code_internal
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to create property",
                )
            )

        if isinstance(result, Success):
            detail = result.value
            await self._invalidator.invalidate(
                PropertyTag(detail.id),
                OwnerTag(detail.owner_id),
                OwnersListTag(),
                PropertiesListTag(),
            )
            self._logger.info(
                "property_created", property_id=detail.id, owner_id=detail.owner_id
            )
        return result
