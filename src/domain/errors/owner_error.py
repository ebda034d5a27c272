"""Owner domain errors.

Usage:
    from src.domain.errors import OwnerError

    return Failure(error=OwnerError.INVALID_PHOTO_FORMAT)
"""


class OwnerError:
    """Owner error constants."""

    INVALID_NAME = "Owner name is required and cannot exceed 100 characters"

    INVALID_ADDRESS = "Owner address cannot exceed 200 characters"

    INVALID_PHOTO_FORMAT = "Photo must be a base64 data URI (data:image/...;base64,...)"

    UNSUPPORTED_PHOTO_TYPE = "Only JPEG, PNG and GIF photos are allowed"

    PHOTO_TOO_LARGE = "Photo cannot exceed 5 MB"

    INLINE_DATA_REQUIRED = "New owner does not exist and no owner data was provided"
    """Sales and property creation can only create owners from inline data."""
