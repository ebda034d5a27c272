"""Classification of database errors worth retrying.

Used as ``RetryPolicy.is_transient`` by the container.
"""

from sqlalchemy.exc import DBAPIError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

# Serialization failure, deadlock, lock timeout, admin/crash shutdown
_TRANSIENT_SQLSTATES = frozenset({"40001", "40P01", "55P03", "57P01", "57P02", "57P03"})

_TRANSIENT_MESSAGES = (
    "database is locked",
    "database table is locked",
    "deadlock detected",
    "could not serialize access",
    "server closed the connection",
    "connection reset",
    "connection refused",
    "timeout expired",
)


def is_transient_database_error(error: BaseException) -> bool:
    """True for failures that may succeed on a fresh attempt.

    Covers dropped connections, pool timeouts, SQLite lock contention and
    PostgreSQL serialization/deadlock/lock-timeout SQLSTATEs. Schema,
    constraint and disk errors are permanent even when the driver reports
    them as OperationalError.
    """
    if isinstance(error, PoolTimeoutError):
        return True
    if isinstance(error, DBAPIError):
        if error.connection_invalidated:
            return True
        sqlstate = getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)
        if sqlstate is not None:
            return sqlstate in _TRANSIENT_SQLSTATES or sqlstate.startswith("08")
        message = str(error.orig).lower()
        return any(marker in message for marker in _TRANSIENT_MESSAGES)
    return isinstance(error, (ConnectionError, TimeoutError))
