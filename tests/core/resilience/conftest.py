"""Shared fixtures for the resilience tests.

``FakeClock`` stands in for both the monotonic clock and the sleep function,
so pacing and backoff can be asserted without real waiting.
"""

import asyncio
from typing import List

import pytest

from ui_designer_mcp.core.resilience import (
    OperationKind,
    RequestScheduler,
    ResilientExecutor,
    ResourceSelection,
    ResourceSelector,
    RetryPolicy,
)


class FakeClock:
    """Deterministic clock whose sleep advances time instead of waiting."""

    def __init__(self, start: float = 1000.0):
        self.current = start
        self.sleeps: List[float] = []

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.current += seconds
        # Still yield so other tasks get a turn, like a real sleep would
        await asyncio.sleep(0)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def selector():
    return ResourceSelector(
        {
            OperationKind.TEXT: ResourceSelection("text-primary", "text-fallback"),
            OperationKind.IMAGE: ResourceSelection("image-primary", "image-fallback"),
        }
    )


@pytest.fixture
def make_executor(clock, selector):
    """Factory for executors wired to the fake clock."""

    def factory(
        *,
        min_interval: float = 0.0,
        max_retries: int = 3,
        initial_delay: float = 0.3,
        default_deadline: float = 0.0,
    ) -> ResilientExecutor:
        scheduler = RequestScheduler(min_interval, clock=clock.now, sleep=clock.sleep)
        return ResilientExecutor(
            scheduler,
            selector,
            RetryPolicy(max_retries=max_retries, initial_delay=initial_delay),
            default_deadline=default_deadline,
            sleep=clock.sleep,
        )

    return factory
