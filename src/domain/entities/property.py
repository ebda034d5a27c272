"""Property domain entity.

Pure business logic, no framework dependencies.

Every change to ``price`` or ``owner_id`` goes through a method that returns
the PropertyTrace recording it, so callers cannot move ownership or price
without producing the audit record.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from src.core.result import Failure, Result, Success
from src.domain.entities.owner import Owner
from src.domain.entities.property_trace import (
    PRICE_UPDATE_TRACE,
    PROPERTY_CREATED_TRACE,
    SOLD_TO_TRACE_TEMPLATE,
    TRACE_NAME_MAX_LENGTH,
    PropertyTrace,
)
from src.domain.enums import EntityState
from src.domain.errors import PropertyError

PROPERTY_NAME_MAX_LENGTH = 100
PROPERTY_ADDRESS_MAX_LENGTH = 200
PROPERTY_CODE_MAX_LENGTH = 50
PROPERTY_MIN_YEAR = 1800
PROPERTY_MAX_YEAR = 2100
MIN_SALE_PRICE = Decimal("0.01")

_CENTS = Decimal("0.01")


def to_money(amount: Decimal) -> Decimal:
    """Round an amount to cents using half-up rounding."""
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


def calculate_tax(price: Decimal, tax_percentage: Decimal) -> Decimal:
    """Tax owed on a sale: ``price * tax_percentage / 100`` rounded to cents.

    Example:
        >>> calculate_tax(Decimal("100000"), Decimal("10"))
        Decimal('10000.00')
    """
    return to_money(price * tax_percentage / Decimal(100))


@dataclass(frozen=True, slots=True, kw_only=True)
class PropertyChanges:
    """Partial field set applied by ``Property.apply_update``.

    ``None`` means "leave unchanged".
    """

    name: str | None = None
    address: str | None = None
    price: Decimal | None = None
    code_internal: str | None = None
    year: int | None = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.name, self.address, self.price, self.code_internal, self.year)
        )


@dataclass
class Property:
    """Real-estate property owned by exactly one Owner.

    Business Rules:
        - ``code_internal`` is unique across properties
        - Price is never negative
        - Year is between 1800 and 2100
        - Price and owner changes always produce a PropertyTrace
        - Inactive (soft-deleted) properties cannot change

    Attributes:
        id: Property identifier (None until persisted).
        name: Display name.
        address: Postal address.
        price: Current price.
        code_internal: Unique internal reference.
        year: Construction year.
        owner_id: Current owner.
        is_active: Soft-delete flag.
        created_at: Set by the database on insert.
        updated_at: Set by the database on update.
        state: Persistence state (see EntityState).
    """

    id: int | None
    name: str
    address: str
    price: Decimal
    code_internal: str
    year: int
    owner_id: int
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    state: EntityState = field(default=EntityState.NEW, compare=False)

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    def record_creation(self, created_at: datetime) -> Result[PropertyTrace, str]:
        """Build the initial "Property Created" trace once the id is known."""
        if self.id is None:
            return Failure(error=PropertyError.NOT_PERSISTED)
        return Success(
            value=PropertyTrace(
                property_id=self.id,
                name=PROPERTY_CREATED_TRACE,
                date_sale=created_at,
                value=to_money(self.price),
                tax=Decimal("0.00"),
            )
        )

    def sell_to(
        self,
        new_owner: Owner,
        sale_price: Decimal,
        tax_percentage: Decimal,
        sold_at: datetime,
    ) -> Result[PropertyTrace, str]:
        """Transfer the property to ``new_owner`` at ``sale_price``.

        Args:
            new_owner: Persisted owner receiving the property.
            sale_price: Agreed price (must exceed 0.01).
            tax_percentage: Percentage between 0 and 100.
            sold_at: Sale timestamp (UTC).

        Returns:
            Success(trace): Ownership and price changed; trace must be stored.
            Failure(error): Rule violated; nothing changed.

        Side Effects (on success):
            - Sets owner_id and price
            - Marks the entity DIRTY
        """
        if not self.is_active:
            return Failure(error=PropertyError.INACTIVE)
        if self.id is None:
            return Failure(error=PropertyError.NOT_PERSISTED)
        if sale_price < MIN_SALE_PRICE:
            return Failure(error=PropertyError.INVALID_SALE_PRICE)
        if not Decimal(0) <= tax_percentage <= Decimal(100):
            return Failure(error=PropertyError.INVALID_TAX_PERCENTAGE)

        assert new_owner.id is not None  # persisted owners only
        price = to_money(sale_price)
        trace = PropertyTrace(
            property_id=self.id,
            name=SOLD_TO_TRACE_TEMPLATE.format(owner_name=new_owner.name)[
                :TRACE_NAME_MAX_LENGTH
            ],
            date_sale=sold_at,
            value=price,
            tax=calculate_tax(price, tax_percentage),
        )
        self.owner_id = new_owner.id
        self.price = price
        self._mark_dirty()
        return Success(value=trace)

    def apply_update(
        self,
        changes: PropertyChanges,
        updated_at: datetime,
    ) -> Result[PropertyTrace | None, str]:
        """Apply a partial update.

        Returns:
            Success(trace): Price changed; the "Price Update" trace must be stored.
            Success(None): Fields updated without a price change.
            Failure(error): Rule violated; nothing changed.
        """
        if not self.is_active:
            return Failure(error=PropertyError.INACTIVE)
        if self.id is None:
            return Failure(error=PropertyError.NOT_PERSISTED)
        if changes.is_empty():
            return Failure(error=PropertyError.NO_CHANGES)
        if changes.price is not None and changes.price < 0:
            return Failure(error=PropertyError.INVALID_PRICE)
        if changes.year is not None and not (
            PROPERTY_MIN_YEAR <= changes.year <= PROPERTY_MAX_YEAR
        ):
            return Failure(error=PropertyError.INVALID_YEAR)

        new_price = to_money(changes.price) if changes.price is not None else None
        price_changed = new_price is not None and new_price != to_money(self.price)

        if changes.name is not None:
            self.name = changes.name
        if changes.address is not None:
            self.address = changes.address
        if changes.code_internal is not None:
            self.code_internal = changes.code_internal
        if changes.year is not None:
            self.year = changes.year
        self._mark_dirty()

        if not price_changed:
            return Success(value=None)

        assert new_price is not None
        self.price = new_price
        return Success(
            value=PropertyTrace(
                property_id=self.id,
                name=PRICE_UPDATE_TRACE,
                date_sale=updated_at,
                value=new_price,
                tax=Decimal("0.00"),
            )
        )

    def deactivate(self) -> None:
        """Soft-delete the property."""
        self.is_active = False
        self._mark_dirty()

    def mark_loaded(self) -> None:
        """Record that the entity now matches its stored row."""
        self.state = EntityState.LOADED

    def _mark_dirty(self) -> None:
        if self.state is EntityState.LOADED:
            self.state = EntityState.DIRTY
