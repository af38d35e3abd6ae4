"""Deadline and cancellation handling for store calls."""

import asyncio
from collections.abc import Awaitable
from contextlib import suppress
from typing import TypeVar

from loguru import logger

from newsfeed.common.exceptions import QueryCancelledError, QueryTimeoutError
from newsfeed.utils.prometheus import STORE_FAILURES

__all__ = ["run_with_deadline"]

T = TypeVar("T")


async def run_with_deadline(
    awaitable: Awaitable[T],
    *,
    timeout: float | None,
    cancel_event: asyncio.Event | None = None,
    operation: str = "query",
) -> T:
    """Await ``awaitable`` unless the deadline passes or the caller gives up.

    Args:
        awaitable: The store call to run.
        timeout: Seconds to wait, None waits without a deadline.
        cancel_event: Optional signal set by the caller to abandon the call.
        operation: Name used in log records.

    Returns:
        The result of ``awaitable``.

    Raises:
        StorageError: If the deadline expired or ``cancel_event`` was set
            first. The pending call is cancelled before raising.
    """
    task = asyncio.ensure_future(awaitable)
    waiters: set[asyncio.Future] = {task}
    cancel_waiter: asyncio.Future | None = None
    if cancel_event is not None:
        cancel_waiter = asyncio.ensure_future(cancel_event.wait())
        waiters.add(cancel_waiter)

    try:
        done, _ = await asyncio.wait(
            waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED
        )
    except asyncio.CancelledError:
        for waiter in waiters:
            waiter.cancel()
        raise

    if cancel_waiter is not None and not cancel_waiter.done():
        cancel_waiter.cancel()

    if task in done:
        return task.result()

    task.cancel()
    await asyncio.wait({task})
    with suppress(asyncio.CancelledError):
        if error := task.exception():
            logger.debug(
                "Abandoned store call failed", operation=operation, error=str(error)
            )

    if cancel_waiter is not None and cancel_waiter in done:
        STORE_FAILURES.labels(operation, "cancelled").inc()
        logger.info("Store call cancelled by caller", operation=operation)
        raise QueryCancelledError

    STORE_FAILURES.labels(operation, "timeout").inc()
    logger.warning("Store call timed out", operation=operation, timeout=timeout)
    raise QueryTimeoutError(timeout)
