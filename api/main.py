"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Runs startup logic (build the scheduler + clock, optionally load sample data)
3. Registers all routers (processes, scheduler, health)
4. Runs shutdown logic (stop the clock thread)

The `lifespan` context manager is FastAPI's way of handling startup/shutdown.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from driver.clock import SimulationClock
from loaders.sample_data import load_sample_data
from scheduler.core import ProcessScheduler
from api.routers import processes, scheduler, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs on startup (before yield) and shutdown (after yield).

    Startup:
    - Builds one ProcessScheduler with the default policy
    - Wraps it in a SimulationClock (the lock every endpoint uses)
    - Loads SAMPLE_DATA_PATH if LOAD_SAMPLE_DATA is set
    - Starts the periodic tick thread if AUTO_ADVANCE is set

    Shutdown:
    - Stops the tick thread
    """
    # ── Startup ─────────────────────────────────────────────────
    proc_scheduler = ProcessScheduler(policy=settings.DEFAULT_SCHEDULING_POLICY)
    if settings.LOAD_SAMPLE_DATA:
        load_sample_data(proc_scheduler, settings.SAMPLE_DATA_PATH)

    app.state.clock = SimulationClock(proc_scheduler)
    if settings.AUTO_ADVANCE:
        app.state.clock.start()

    logger.info(f"API ready, policy: {proc_scheduler.policy.value}")

    yield

    # ── Shutdown ────────────────────────────────────────────────
    app.state.clock.stop()
    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Process Scheduling Simulator",
        description="Tick-by-tick CPU scheduling simulator (FCFS, SJF, Priority, Round Robin)",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(processes.router)
    app.include_router(scheduler.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
