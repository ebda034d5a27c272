"""Email value object with validation.

Registration stores emails in normalized form, and login uses
``Email.looks_like`` to decide whether the identifier is an email or a
username.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Validated, normalized email address.

    Attributes:
        value: Normalized email address.

    Raises:
        ValueError: If the address is not a valid email.

    Example:
        >>> str(Email("Ana@Example.com"))
        'Ana@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        try:
            validated = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        # Frozen dataclass: bypass __setattr__ to store the normalized form
        object.__setattr__(self, "value", validated.normalized)

    @staticmethod
    def looks_like(identifier: str) -> bool:
        """Cheap check used to route a login identifier to the email lookup."""
        return "@" in identifier

    def __str__(self) -> str:
        return self.value
