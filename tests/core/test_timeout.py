"""Tests for the timeout race."""

import asyncio
import time

import pytest

from health_indicator.core.timeout import promise_timeout
from health_indicator.errors import ProbeTimeoutError


async def test_returns_result_within_budget():
    async def answer():
        return 42

    assert await promise_timeout(100, answer()) == 42


async def test_propagates_exceptions():
    async def broken():
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await promise_timeout(100, broken())


async def test_raises_on_timeout():
    with pytest.raises(ProbeTimeoutError) as exc_info:
        await promise_timeout(20, asyncio.sleep(5))
    assert exc_info.value.timeout == 20
    assert str(exc_info.value) == "timeout of 20ms exceeded"


async def test_does_not_wait_for_task_that_ignores_cancellation():
    finished = asyncio.Event()

    async def stubborn():
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            await asyncio.sleep(0.2)
        finished.set()

    started = time.monotonic()
    with pytest.raises(ProbeTimeoutError):
        await promise_timeout(20, stubborn())
    assert time.monotonic() - started < 0.15

    await asyncio.wait_for(finished.wait(), timeout=1)
