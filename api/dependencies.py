"""
FastAPI dependency injection.

How this works:
- An endpoint declares `clock: SimulationClock = Depends(get_clock)`
- FastAPI calls get_clock() before your endpoint runs
- Your endpoint receives the clock and works on clock.scheduler under clock.lock

There is ONE clock (and therefore one scheduler) per app, built in the lifespan.
Tests swap it out through app.dependency_overrides.
"""

from fastapi import Request

from driver.clock import SimulationClock


def get_clock(request: Request) -> SimulationClock:
    """Returns the SimulationClock stored on the app during startup."""
    return request.app.state.clock
