"""
Shared test fixtures.

The HTTP tests never start the real lifespan (no clock thread, no sample
data). Instead each test gets:
- a fresh ProcessScheduler (FCFS, so creation order is dispatch order)
- a SimulationClock wrapping it, NOT started, so tests tick explicitly
- httpx.AsyncClient with ASGI transport (no network)

This means tests:
- Are deterministic (time only moves when a test calls /scheduler/tick)
- Run in milliseconds
- Are fully isolated (each test gets a fresh scheduler with pids starting at 1)
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.dependencies import get_clock
from driver.clock import SimulationClock
from models.enums import SchedulingPolicy
from scheduler.core import ProcessScheduler


@pytest.fixture
def clock():
    """A stopped clock around a fresh FCFS scheduler."""
    return SimulationClock(ProcessScheduler(policy=SchedulingPolicy.FCFS), interval=0.01)


@pytest_asyncio.fixture
async def client(clock):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides tells FastAPI: "instead of the clock built in the
    lifespan, use this one", which also lets tests inspect scheduler state
    directly through the `clock` fixture.
    """
    app = create_app()

    async def override_get_clock():
        return clock

    app.dependency_overrides[get_clock] = override_get_clock

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
