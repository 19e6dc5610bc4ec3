"""
Round Robin ordering.

For ordering purposes this is identical to FCFS: the ready queue is a FIFO.
The difference is quantum_expired(): every time the running process has
accumulated a multiple of its time slice (2 ticks by default), the scheduler
sends it to the back of the line and dispatches the next head.

    tick 1: P1 dispatched           ready = [P2, P3]
    tick 2: P1 elapsed=1            ready = [P2, P3]
    tick 3: P1 elapsed=2 → requeue  ready = [P3, P1], P2 dispatched

The slice size controls the tradeoff:
- Small slice: very fair, lots of switching
- Large slice: less switching, approaches FCFS behavior
"""

from models.process import ProcessDescriptor
from scheduler.base import AbstractOrderingPolicy


class RoundRobinPolicy(AbstractOrderingPolicy):

    def reorder(self, processes: list[ProcessDescriptor]) -> list[ProcessDescriptor]:
        return list(processes)

    def quantum_expired(self, process: ProcessDescriptor) -> bool:
        return process.elapsed_time % process.time_slice == 0

    @property
    def policy_name(self) -> str:
        return "round_robin"
