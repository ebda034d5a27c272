"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.cache_policy import (
    DEFAULT_CACHE_POLICY,
    ENTITY_CACHE_POLICY,
    LIST_CACHE_POLICY,
    CacheEntryPolicy,
)
from src.domain.value_objects.email import Email
from src.domain.value_objects.image_data import (
    ALLOWED_IMAGE_CONTENT_TYPES,
    ALLOWED_IMAGE_EXTENSIONS,
    MAX_IMAGE_BYTES,
    MAX_PHOTO_BYTES,
    DecodedImage,
    ImageUpload,
    build_data_uri,
    parse_data_uri,
)
from src.domain.value_objects.property_filter import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PropertyFilter,
)
from src.domain.value_objects.property_listing import PropertyListing

__all__ = [
    "ALLOWED_IMAGE_CONTENT_TYPES",
    "ALLOWED_IMAGE_EXTENSIONS",
    "CacheEntryPolicy",
    "DEFAULT_CACHE_POLICY",
    "DEFAULT_PAGE_SIZE",
    "DecodedImage",
    "ENTITY_CACHE_POLICY",
    "Email",
    "ImageUpload",
    "LIST_CACHE_POLICY",
    "MAX_IMAGE_BYTES",
    "MAX_PAGE_SIZE",
    "MAX_PHOTO_BYTES",
    "PropertyFilter",
    "PropertyListing",
    "build_data_uri",
    "parse_data_uri",
]
