"""
Process descriptor (PCB) — identity plus run-state of one simulated process.

Key design decisions:
- Fields are read-only properties and the transition methods are private.
  Callers (API, loader) can observe a descriptor; only ProcessScheduler
  drives its transitions.
- pid is assigned by the scheduler, never by the descriptor itself
- elapsed_time never exceeds total_time; reaching total_time is the ONLY way
  _advance_one_tick() moves a process to TERMINATED
- time_slice is stored per process (default 2 ticks) and only Round Robin reads it

Lifecycle:
    NEW → READY → RUNNING → TERMINATED
                    ↓  ↑
                   READY      (Round Robin quantum expiry)
"""

import copy

from config.settings import settings
from models.enums import ProcessState


def is_valid_priority(value: int) -> bool:
    return settings.MIN_PRIORITY <= value <= settings.MAX_PRIORITY


def is_valid_total_time(value: int) -> bool:
    return value > 0


class ProcessDescriptor:

    def __init__(
        self,
        pid: int,
        name: str,
        priority: int,
        total_time: int,
        time_slice: int = settings.TIME_SLICE,
    ):
        self._pid = pid
        self._name = name
        self._priority = priority
        self._total_time = total_time
        self._time_slice = time_slice
        self._elapsed_time = 0
        self._state = ProcessState.NEW

    # ── Read-only view ──────────────────────────────────────────
    @property
    def pid(self) -> int:
        return self._pid

    @property
    def name(self) -> str:
        return self._name

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def total_time(self) -> int:
        return self._total_time

    @property
    def elapsed_time(self) -> int:
        return self._elapsed_time

    @property
    def time_slice(self) -> int:
        return self._time_slice

    @property
    def state(self) -> ProcessState:
        return self._state

    @property
    def remaining_time(self) -> int:
        """Ticks still needed. This is the SJF ordering key."""
        return self._total_time - self._elapsed_time

    # ── Transitions (driven by ProcessScheduler) ────────────────
    def _advance_one_tick(self) -> None:
        """
        Consume one tick of CPU time.

        Terminates the process when elapsed_time reaches total_time. Any other
        state change (e.g. the Round Robin requeue) is the scheduler's call.
        A process whose total_time was lowered to exactly its elapsed_time is
        terminated without consuming another tick.
        """
        if self._state == ProcessState.TERMINATED:
            return
        if self._elapsed_time < self._total_time:
            self._elapsed_time += 1
        if self._elapsed_time == self._total_time:
            self._state = ProcessState.TERMINATED

    def _mark_ready(self) -> None:
        self._state = ProcessState.READY

    def _mark_running(self) -> None:
        self._state = ProcessState.RUNNING

    def _terminate(self) -> None:
        self._state = ProcessState.TERMINATED

    def _change_priority(self, value: int) -> bool:
        if not is_valid_priority(value):
            return False
        self._priority = value
        return True

    def _change_total_time(self, value: int) -> bool:
        # Keeps elapsed <= total and TERMINATED <=> elapsed == total
        if self._state == ProcessState.TERMINATED:
            return False
        if not is_valid_total_time(value) or value < self._elapsed_time:
            return False
        self._total_time = value
        return True

    def snapshot(self) -> "ProcessDescriptor":
        """Detached copy; mutating it never touches scheduler state."""
        return copy.copy(self)

    def describe(self) -> str:
        return (
            f"PID: {self._pid}, name: {self._name}, state: {self._state.value}, "
            f"priority: {self._priority}, elapsed: {self._elapsed_time}/{self._total_time}"
        )

    def __repr__(self) -> str:
        return f"<Process {self._pid} [{self._name}] {self._state.value}>"
