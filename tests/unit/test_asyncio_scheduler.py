"""Unit tests for the asyncio-backed repeating scheduler."""

import asyncio

import pytest

from src.infrastructure.scheduling.asyncio_scheduler import AsyncioScheduler


class TestAsyncioScheduler:
    def test_fires_repeatedly_until_cancelled(self):
        calls = []

        async def scenario():
            handle = AsyncioScheduler().schedule_repeating(0.01, lambda: calls.append(1))
            await asyncio.sleep(0.055)
            handle.cancel()
            fired = len(calls)
            await asyncio.sleep(0.03)
            return handle, fired

        handle, fired = asyncio.run(scenario())

        assert fired >= 2
        assert len(calls) == fired
        assert handle.cancelled

    def test_failing_callback_keeps_schedule_alive(self):
        calls = []

        def flaky():
            calls.append(1)
            raise RuntimeError("boom")

        async def scenario():
            handle = AsyncioScheduler().schedule_repeating(0.01, flaky)
            await asyncio.sleep(0.045)
            handle.cancel()

        asyncio.run(scenario())
        assert len(calls) >= 2

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            AsyncioScheduler().schedule_repeating(0, lambda: None)

    def test_requires_running_loop(self):
        with pytest.raises(RuntimeError):
            AsyncioScheduler().schedule_repeating(1.0, lambda: None)
