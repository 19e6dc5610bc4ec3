"""
Simulation clock — the single owner of a ProcessScheduler.

ProcessScheduler is a plain synchronous state machine with no locking.
As soon as more than one thread can reach it (the periodic tick thread
plus HTTP request handlers), every call has to be serialized. This class
holds the ONE lock for that:

    with clock.lock:
        clock.scheduler.create_process("editor", 5, 10)

Two ways to advance time:
- tick(count): advance N ticks right now (tests, API, headless driver)
- start(): a daemon thread ticks every `interval` seconds until stop(),
  like a GUI timer pressing "advance" once per second
"""

import logging
import threading
import time
from typing import Optional

from config.settings import settings
from scheduler.core import ProcessScheduler

logger = logging.getLogger(__name__)


class SimulationClock:

    def __init__(self, scheduler: ProcessScheduler, interval: float = settings.TICK_INTERVAL):
        self.scheduler = scheduler
        self.interval = interval
        self.lock = threading.Lock()
        self._running = False
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._running

    def tick(self, count: int = 1) -> int:
        """Advance the scheduler `count` ticks under the lock. Returns the new current time."""
        with self.lock:
            for _ in range(count):
                self.scheduler.advance_one_tick()
            return self.scheduler.current_time

    def start(self) -> None:
        """Start ticking in a daemon thread. Calling start() twice is a no-op."""
        if self._running:
            return
        self._running = True
        self._thread = threading.Thread(target=self._run_loop, name="sim-clock", daemon=True)
        self._thread.start()
        logger.info(f"Simulation clock started, one tick every {self.interval}s")

    def stop(self) -> None:
        """Signal the loop to stop and wait for the current tick to finish."""
        self._running = False
        if self._thread is not None:
            self._thread.join(timeout=self.interval + 1)
            self._thread = None
        logger.info("Simulation clock stopped")

    def _run_loop(self) -> None:
        while self._running:
            try:
                self.tick()
            except Exception as e:
                logger.error(f"Simulation clock error: {e}", exc_info=True)
            time.sleep(self.interval)
