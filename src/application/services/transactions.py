"""Retryable transaction boundary.

``run_in_transaction`` executes a unit of work closure and owns its
commit/rollback:

    work returns Success  -> commit, return the result
    work returns Failure  -> rollback, return the result (never retried)
    work/commit raises    -> rollback; retry if the policy says the error
                             is transient and attempts remain, else re-raise

Retries are driven by tenacity (stop after ``max_attempts``, exponential
wait starting at ``base_delay``).

The closure receives the Unit of Work and must reload whatever it needs on
each attempt: nothing read in a failed attempt is trusted afterwards.

Usage:
    async def work(uow: UnitOfWork) -> Result[UpdatePropertyResult, ApplicationError]:
        property_ = await uow.properties.find_by_id(cmd.property_id)
        ...

    result = await run_in_transaction(self._uow, work, self._retry_policy)
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from src.core.result import Failure, Result
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work import UnitOfWork


def _never_transient(_error: BaseException) -> bool:
    return False


@dataclass(frozen=True, slots=True, kw_only=True)
class RetryPolicy:
    """How many times, and how patiently, a transaction is retried.

    Attributes:
        max_attempts: Total attempts including the first (>= 1).
        base_delay: Seconds slept after the first failed attempt; doubles
            after every further failure.
        is_transient: Classifies an exception as retryable.
        sleep: Awaitable sleep used between attempts.
    """

    max_attempts: int = 3
    base_delay: float = 0.1
    is_transient: Callable[[BaseException], bool] = field(default=_never_transient)
    sleep: Callable[[float], Awaitable[None]] = field(default=asyncio.sleep, compare=False)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0:
            raise ValueError("base_delay cannot be negative")

    def retrying(self, logger: LoggerProtocol | None = None) -> AsyncRetrying:
        """Build the tenacity controller for one transaction."""
        return AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.base_delay),
            retry=retry_if_exception(self.is_transient),
            before_sleep=_log_retry(logger, self.max_attempts),
            sleep=self.sleep,
            reraise=True,
        )


NO_RETRY = RetryPolicy(max_attempts=1, base_delay=0)


def _log_retry(
    logger: LoggerProtocol | None, max_attempts: int
) -> Callable[[RetryCallState], None]:
    def before_sleep(retry_state: RetryCallState) -> None:
        if logger is None:
            return
        error = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else None
        logger.warning(
            "transaction_retry",
            attempt=retry_state.attempt_number,
            max_attempts=max_attempts,
            delay_seconds=delay,
            error_type=type(error).__name__,
        )

    return before_sleep


async def run_in_transaction[T, E](
    uow: UnitOfWork,
    work: Callable[[UnitOfWork], Awaitable[Result[T, E]]],
    policy: RetryPolicy = NO_RETRY,
    logger: LoggerProtocol | None = None,
) -> Result[T, E]:
    """Run ``work`` inside a transaction, retrying transient failures.

    Returns:
        The Result produced by the last attempt.

    Raises:
        Exception: The last error when it is not transient or attempts are
            exhausted. The transaction has been rolled back.
    """

    async def attempt() -> Result[T, E]:
        try:
            result = await work(uow)
            if isinstance(result, Failure):
                await uow.rollback()
                return result
            await uow.commit()
            return result
        except Exception:
            await uow.rollback()
            raise

    return await policy.retrying(logger)(attempt)
