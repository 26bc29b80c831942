"""
Shared test fixtures.

These replace real-world inputs with deterministic ones:
- Wall clock → FakeClock (tests move time forward explicitly)
- HTTP server → httpx.AsyncClient with ASGI transport (no network)

This means tests:
- Never depend on how fast the machine is (aging is driven by the fake clock)
- Run in milliseconds
- Are fully isolated (each test gets a fresh scheduler)
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.dependencies import get_scheduler
from scheduler.weighted import WeightedScheduler

# 2025-01-01 00:00:00 UTC
T0 = 1735689600.0
HOUR = 3600.0


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: float = T0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    """A uniform-weight scheduler driven by the fake clock."""
    return WeightedScheduler(clock=clock)


@pytest_asyncio.fixture
async def client(scheduler):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides swaps the app's scheduler for the fixture one, so
    tests can both drive the API and inspect the scheduler directly.
    """
    app = create_app()

    async def override_get_scheduler():
        return scheduler

    app.dependency_overrides[get_scheduler] = override_get_scheduler

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
