"""
Headless simulation entry point.

Loads the sample process file, then advances the clock once per
TICK_INTERVAL seconds, logging the running process and the ready queue
after every tick. Stops when:

    - every process has finished (the scheduler is idle), or
    - MAX_TICKS ticks have passed (if MAX_TICKS > 0), or
    - Ctrl+C (SIGINT) / SIGTERM arrives

To run:
    python -m driver.main

Everything is configured through environment variables (see config/settings.py):
    DEFAULT_SCHEDULING_POLICY=sjf TICK_INTERVAL=0.2 python -m driver.main
"""

import logging
import signal
import threading

from config.settings import settings
from driver.clock import SimulationClock
from loaders.sample_data import load_sample_data
from scheduler.core import ProcessScheduler

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def run(clock: SimulationClock, shutdown_event: threading.Event, max_ticks: int = 0) -> int:
    """
    Drive the clock until idle, max_ticks, or shutdown. Returns ticks run.

    Uses Event.wait() as the sleep so a shutdown signal interrupts it immediately.
    """
    scheduler = clock.scheduler
    ticks = 0
    while not shutdown_event.is_set():
        with clock.lock:
            if scheduler.is_idle:
                logger.info(f"All processes finished at t={scheduler.current_time}")
                break

        clock.tick()
        ticks += 1

        with clock.lock:
            running = scheduler.running_process
            logger.info(
                f"t={scheduler.current_time} running={running.pid if running else '-'} "
                f"ready=[{scheduler.ready_queue_summary()}]"
            )

        if max_ticks and ticks >= max_ticks:
            logger.info(f"Reached MAX_TICKS={max_ticks}")
            break
        shutdown_event.wait(clock.interval)

    return ticks


def main():
    scheduler = ProcessScheduler(policy=settings.DEFAULT_SCHEDULING_POLICY)
    load_sample_data(scheduler, settings.SAMPLE_DATA_PATH)
    clock = SimulationClock(scheduler)

    # ── Graceful shutdown on Ctrl+C or SIGTERM ──────────────────
    shutdown_event = threading.Event()

    def shutdown(signum, frame):
        logger.info("Shutdown signal received, stopping...")
        shutdown_event.set()

    signal.signal(signal.SIGTERM, shutdown)
    signal.signal(signal.SIGINT, shutdown)

    logger.info(f"Simulating with policy: {scheduler.policy.value}")
    run(clock, shutdown_event, max_ticks=settings.MAX_TICKS)

    print(scheduler.describe_processes())


if __name__ == "__main__":
    main()
