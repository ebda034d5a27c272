"""Application services shared by command and query handlers."""

from src.application.services.auth_tokens import AuthTokenIssuer
from src.application.services.cache_invalidation import (
    CacheInvalidator,
    CacheTag,
    OwnersListTag,
    OwnerTag,
    PropertiesListTag,
    PropertyTag,
)
from src.application.services.owner_resolution import resolve_owner
from src.application.services.result_cache import ResultCache
from src.application.services.transactions import NO_RETRY, RetryPolicy, run_in_transaction

__all__ = [
    "NO_RETRY",
    "AuthTokenIssuer",
    "CacheInvalidator",
    "CacheTag",
    "OwnerTag",
    "OwnersListTag",
    "PropertiesListTag",
    "PropertyTag",
    "ResultCache",
    "RetryPolicy",
    "resolve_owner",
    "run_in_transaction",
]
