"""SellProperty command handler.

Flow:
1. Validate input (new owner id, sale price, tax percentage, inline owner)
2. In one retryable transaction:
   a. Load the active property (404 if missing, nothing written)
   b. Resolve the buyer: refresh from inline data, create it from inline
      data, or 404 when missing without inline data
   c. Property.sell_to: computes the tax, reassigns owner and price, returns
      the "Sold to ..." trace (a sale to the current owner is recorded too)
   d. Append the trace and write the property
3. After commit: invalidate the property, both owners and both lists

Any failure inside the transaction rolls everything back, so a partial
owner or price change is never observable.
"""

from datetime import UTC, datetime

from src.application.commands.field_checks import first_invalid_field, invalid_inline_owner
from src.application.commands.property_commands import SellProperty
from src.application.dtos.property_dtos import SaleResult
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    from_property_error,
    not_found,
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
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work import UnitOfWork
from src.domain.validators import (
    validate_positive_id,
    validate_sale_price,
    validate_tax_percentage,
)


class SellPropertyHandler:
    """Handler for SellProperty command.

    Dependencies (injected via constructor):
        - UnitOfWork: Property, owner and trace repositories sharing one session
        - RetryPolicy: Retries transient database failures
        - CacheInvalidator: Tag-based invalidation after commit
        - LoggerProtocol: Structured logging
    """

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

    async def handle(self, cmd: SellProperty) -> Result[SaleResult, ApplicationError]:
        """Handle SellProperty command.

        Returns:
            Success(SaleResult): Sale committed and caches invalidated.
            Failure(ApplicationError): COMMAND_VALIDATION_FAILED, NOT_FOUND,
                INVALID_OPERATION or COMMAND_EXECUTION_FAILED.
        """
        invalid = first_invalid_field(
            ("new_owner_id", validate_positive_id, cmd.new_owner_id),
            ("sale_price", validate_sale_price, cmd.sale_price),
            ("tax_percentage", validate_tax_percentage, cmd.tax_percentage),
        ) or invalid_inline_owner(cmd.new_owner, "new_owner")
        if invalid is not None:
            return Failure(error=invalid)

        async def work(uow: UnitOfWork) -> Result[SaleResult, ApplicationError]:
            property_ = await uow.properties.find_by_id(cmd.property_id)
            if property_ is None:
                return Failure(
                    error=not_found("Property", cmd.property_id, ErrorCode.PROPERTY_NOT_FOUND)
                )

            owner_result = await resolve_owner(
                uow, cmd.new_owner_id, cmd.new_owner, refresh_existing=True
            )
            if isinstance(owner_result, Failure):
                return owner_result
            new_owner = owner_result.value

            previous_owner_id = property_.owner_id
            sold_at = datetime.now(UTC)
            transition = property_.sell_to(
                new_owner, cmd.sale_price, cmd.tax_percentage, sold_at
            )
            if isinstance(transition, Failure):
                return Failure(error=from_property_error(transition.error))
            trace = transition.value

            await uow.traces.add(trace)
            await uow.properties.update(property_)
            return Success(
                value=SaleResult(
                    property_id=cmd.property_id,
                    previous_owner_id=previous_owner_id,
                    new_owner_id=cmd.new_owner_id,
                    sale_price=trace.value,
                    tax=trace.tax,
                    sale_date=sold_at,
                )
            )

        try:
            result = await run_in_transaction(
                self._uow, work, self._retry_policy, self._logger
            )
        except Exception as e:
            self._logger.error(
                "property_sale_failed",
                error=e,
                property_id=cmd.property_id,
                new_owner_id=cmd.new_owner_id,
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Failed to sell property",
                )
            )

        match result:
            case Success(value=sale):
                await self._invalidator.invalidate(
                    PropertyTag(sale.property_id),
                    OwnerTag(sale.previous_owner_id),
                    OwnerTag(sale.new_owner_id),
                    OwnersListTag(),
                    PropertiesListTag(),
                )
                self._logger.info(
                    "property_sold",
                    property_id=sale.property_id,
                    previous_owner_id=sale.previous_owner_id,
                    new_owner_id=sale.new_owner_id,
                    sale_price=str(sale.sale_price),
                    tax=str(sale.tax),
                    notes=cmd.notes,
                )
            case Failure(error=error):
                self._logger.info(
                    "property_sale_rejected",
                    property_id=cmd.property_id,
                    new_owner_id=cmd.new_owner_id,
                    reason=error.code.value,
                )
        return result
