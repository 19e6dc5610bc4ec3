"""
Health check endpoint.

The first thing you hit to verify the API is up. It also reports the
simulated time, which proves the scheduler is reachable through the lock.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_clock
from driver.clock import SimulationClock

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(clock: SimulationClock = Depends(get_clock)) -> dict:
    """Check that the scheduler is reachable."""
    with clock.lock:
        current_time = clock.scheduler.current_time

    return {"status": "healthy", "current_time": current_time}
