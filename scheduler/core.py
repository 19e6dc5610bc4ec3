"""
Process scheduler — the dispatch and tick state machine.

ProcessScheduler owns everything about one simulation:

    ┌──────────────────────────────────────────────────────────┐
    │ ProcessScheduler                                          │
    │                                                          │
    │  _processes: {pid: ProcessDescriptor}   ← the only owner │
    │  _ready:     deque[pid]                 ← FIFO of ids    │
    │  _running:   pid | None                 ← the CPU        │
    │  _policy:    FCFS / SJF / Priority / Round Robin         │
    │  current_time, _next_pid                ← per instance   │
    └──────────────────────────────────────────────────────────┘

The ready queue and the running slot hold pids, never descriptors, so there
is exactly one mutable object per process. Two schedulers never share
counters, which lets several simulations coexist in one interpreter.

Error handling: nothing in here raises for expected outcomes. Unknown pids,
out-of-range values and invalid transitions return False (or None) and
leave the state untouched. Only programming errors (an unknown policy
name) raise ValueError.

Threading: this class is NOT thread-safe. One driver calls advance_one_tick()
serially; anything that shares a scheduler across threads must hold a
single lock around every call (see driver/clock.py).
"""

import logging
from collections import deque
from typing import Optional

from config.settings import settings
from models.enums import ProcessState, SchedulingPolicy
from models.process import ProcessDescriptor, is_valid_priority, is_valid_total_time
from scheduler.base import AbstractOrderingPolicy
from scheduler.registry import create_policy

logger = logging.getLogger(__name__)

EMPTY_QUEUE_SUMMARY = "empty"


class ProcessScheduler:

    def __init__(
        self,
        policy: SchedulingPolicy | str = settings.DEFAULT_SCHEDULING_POLICY,
        time_slice: int = settings.TIME_SLICE,
    ):
        self._processes: dict[int, ProcessDescriptor] = {}
        self._ready: deque[int] = deque()
        self._running: Optional[int] = None
        self._next_pid = 1
        self._time_slice = time_slice
        self._policy: AbstractOrderingPolicy = create_policy(policy)
        self.current_time = 0
        self.dispatch_count = 0

    # ── Policy ──────────────────────────────────────────────────
    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy(self._policy.policy_name)

    def set_policy(self, policy: SchedulingPolicy | str) -> None:
        """Switch the active policy and immediately re-sort the ready queue."""
        old = self._policy.policy_name
        self._policy = create_policy(policy)
        self._reorganize()
        logger.info(f"Policy changed: {old} → {self._policy.policy_name}")

    def _reorganize(self) -> None:
        ordered = self._policy.reorder([self._processes[pid] for pid in self._ready])
        self._ready = deque(p.pid for p in ordered)

    # ── Lifecycle ───────────────────────────────────────────────
    def create_process(
        self, name: str, priority: int, total_time: int
    ) -> Optional[ProcessDescriptor]:
        """
        Build a new READY process and append it to the ready queue.

        Returns None (and consumes no pid) when the name is blank, the
        priority is out of range or total_time is not positive.

        Creation never dispatches; only advance_one_tick() puts a process
        on the CPU.
        """
        if not name or not name.strip():
            logger.debug("Rejected process with empty name")
            return None
        if not is_valid_priority(priority) or not is_valid_total_time(total_time):
            logger.debug(
                f"Rejected process {name!r}: priority={priority}, total_time={total_time}"
            )
            return None

        process = ProcessDescriptor(
            self._next_pid, name, priority, total_time, time_slice=self._time_slice
        )
        self._next_pid += 1

        self._processes[process.pid] = process
        self._ready.append(process.pid)
        process._mark_ready()

        if self._policy.reorders_on_create:
            self._reorganize()

        logger.info(
            f"Created process {process.pid} [{name}] priority={priority} total_time={total_time}"
        )
        return process

    def destroy_process(self, pid: int) -> bool:
        """
        Remove a process from every collection, whatever its state.

        The descriptor is forced to TERMINATED (anyone still holding it sees
        that) and later lookups by pid fail. The CPU is NOT refilled here; the
        next tick dispatches.
        """
        process = self._processes.get(pid)
        if process is None:
            return False

        if self._running == pid:
            self._running = None
        if pid in self._ready:
            self._ready.remove(pid)
        process._terminate()
        del self._processes[pid]

        logger.info(f"Process {pid} [{process.name}] destroyed")
        return True

    def update_priority(self, pid: int, value: int) -> bool:
        """Change a process's priority. The ready queue is re-sorted on the next tick, not now."""
        process = self._processes.get(pid)
        if process is None:
            return False
        return process._change_priority(value)

    def update_total_time(self, pid: int, value: int) -> bool:
        """Change a process's total time. Never below its elapsed time, never once it has finished."""
        process = self._processes.get(pid)
        if process is None:
            return False
        return process._change_total_time(value)

    # ── Dispatch & time ─────────────────────────────────────────
    def dispatch(self) -> None:
        """Put the head of the ready queue on the CPU if the CPU is free."""
        if self._running is not None or not self._ready:
            return

        pid = self._ready.popleft()
        self._processes[pid]._mark_running()
        self._running = pid
        self.dispatch_count += 1
        logger.debug(f"t={self.current_time}: dispatched process {pid}")

    def advance_one_tick(self) -> None:
        """
        Advance the simulation by one tick.

        1. Increment the clock
        2. Charge the running process one tick
           → finished: free the CPU, dispatch the next one, and stop here
           → quantum expired (Round Robin): back to the tail of the ready queue
        3. SJF / Priority: re-sort the ready queue (keys may have changed)
        4. Dispatch if the CPU is free

        A finished process's slot is refilled before the re-sort step, so the
        re-ranking only affects who runs after THAT process.
        """
        self.current_time += 1

        if self._running is not None:
            process = self._processes[self._running]
            process._advance_one_tick()

            if process.state == ProcessState.TERMINATED:
                logger.info(f"t={self.current_time}: process {process.pid} [{process.name}] finished")
                self._running = None
                self.dispatch()
                return

            if self._policy.quantum_expired(process):
                process._mark_ready()
                self._ready.append(process.pid)
                self._running = None
                logger.debug(f"t={self.current_time}: process {process.pid} quantum expired, requeued")

        if self._policy.reorders_on_tick:
            self._reorganize()

        self.dispatch()

    # ── Manual ready-queue edits (operator overrides) ───────────
    def move_to_front(self, pid: int) -> bool:
        """Move a READY process to the head of the ready queue."""
        process = self._processes.get(pid)
        if process is None or process.state != ProcessState.READY or pid not in self._ready:
            return False

        self._ready = deque([pid] + [other for other in self._ready if other != pid])
        return True

    def insert_at(self, pid: int, position: int) -> bool:
        """
        Move a READY process to a 1-based position in the ready queue.

        Valid positions are 1..size+1, size measured before the process is
        taken out of the queue.
        """
        if position < 1 or position > len(self._ready) + 1:
            return False

        process = self._processes.get(pid)
        if process is None or process.state != ProcessState.READY or pid not in self._ready:
            return False

        others = [other for other in self._ready if other != pid]
        others.insert(position - 1, pid)
        self._ready = deque(others)
        return True

    # ── Queries ─────────────────────────────────────────────────
    def find_by_id(self, pid: int) -> Optional[ProcessDescriptor]:
        return self._processes.get(pid)

    def find_all_by_name(self, name: str) -> list[ProcessDescriptor]:
        return [p for p in self._processes.values() if p.name == name]

    def all_processes(self) -> list[ProcessDescriptor]:
        """Snapshot of every known process, in creation order (copies, not the live objects)."""
        return [p.snapshot() for p in self._processes.values()]

    @property
    def running_process(self) -> Optional[ProcessDescriptor]:
        if self._running is None:
            return None
        return self._processes[self._running]

    @property
    def ready_queue(self) -> list[int]:
        """Pids in dispatch order, head first."""
        return list(self._ready)

    def ready_queue_size(self) -> int:
        return len(self._ready)

    def ready_queue_summary(self) -> str:
        """One line: '3(editor) 1(shell)' or 'empty'."""
        if not self._ready:
            return EMPTY_QUEUE_SUMMARY
        return " ".join(f"{pid}({self._processes[pid].name})" for pid in self._ready)

    @property
    def is_idle(self) -> bool:
        return self._running is None and not self._ready

    def describe_processes(self) -> str:
        lines = [f"Current time: {self.current_time}"]
        lines.extend(p.describe() for p in self._processes.values())
        return "\n".join(lines)

    def describe_ready_queue(self) -> str:
        if not self._ready:
            return "Ready queue is empty"
        return "\n".join(
            f"{position}. {self._processes[pid].describe()}"
            for position, pid in enumerate(self._ready, start=1)
        )
