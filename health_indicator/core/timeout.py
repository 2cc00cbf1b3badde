"""Race an awaitable against a timer."""

import asyncio
from typing import Awaitable, TypeVar

from health_indicator.errors import ProbeTimeoutError

T = TypeVar("T")


async def promise_timeout(timeout: int, awaitable: Awaitable[T]) -> T:
    """
    Await ``awaitable`` for at most ``timeout`` milliseconds.

    Unlike ``asyncio.wait_for`` this does not wait for the cancelled task to
    finish, so the caller gets control back on time even if the underlying
    operation ignores cancellation.

    Args:
        timeout: Budget in milliseconds
        awaitable: Coroutine or future to race

    Returns:
        The awaitable's result

    Raises:
        ProbeTimeoutError: If the timer fires first
    """
    task = asyncio.ensure_future(awaitable)
    done, _ = await asyncio.wait({task}, timeout=timeout / 1000)
    if task not in done:
        task.cancel()
        # Retrieve a late exception so it is not reported as never retrieved
        task.add_done_callback(_consume_result)
        raise ProbeTimeoutError(timeout)
    return task.result()


def _consume_result(task: "asyncio.Future[object]") -> None:
    if not task.cancelled():
        task.exception()
