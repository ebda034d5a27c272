"""Authentication domain errors.

Error message constants for credential and token failures.

Usage:
    from src.domain.errors import AuthError

    match token_service.validate_access_token(token):
        case Failure(error=AuthError.EXPIRED_TOKEN):
            ...
"""


class AuthError:
    """Authentication error constants.

    Error Categories:
        - Token errors: INVALID_TOKEN, EXPIRED_TOKEN, INVALID_REFRESH_TOKEN
        - Credential errors: INVALID_CREDENTIALS, USER_INACTIVE
        - Registration errors: USERNAME_TAKEN, EMAIL_TAKEN
    """

    # Token validation errors
    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token has expired"
    INVALID_REFRESH_TOKEN = "Invalid or expired refresh token"
    REFRESH_TOKEN_NOT_FOUND = "Refresh token not found or already inactive"

    # Credential errors
    INVALID_CREDENTIALS = "Invalid username/email or password"
    USER_INACTIVE = "User account is inactive"

    # Registration errors
    USERNAME_TAKEN = "Username is already taken"
    EMAIL_TAKEN = "Email is already registered"
