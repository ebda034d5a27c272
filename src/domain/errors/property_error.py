"""Property domain errors.

Error message constants returned by Property entity transitions.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import PropertyError

    if sale_price <= 0:
        return Failure(error=PropertyError.INVALID_SALE_PRICE)
"""


class PropertyError:
    """Property error constants."""

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_SALE_PRICE = "Sale price must be greater than 0.01"
    """Sales must carry a positive price."""

    INVALID_TAX_PERCENTAGE = "Tax percentage must be between 0 and 100"

    INVALID_PRICE = "Price cannot be negative"

    INVALID_YEAR = "Year must be between 1800 and 2100"

    NO_CHANGES = "At least one field must be provided for update"

    # -------------------------------------------------------------------------
    # State Errors
    # -------------------------------------------------------------------------

    INACTIVE = "Property is not active"
    """Deactivated properties cannot be sold or updated."""

    NOT_PERSISTED = "Property must be saved before recording traces"
