"""
First Come First Served (FCFS) ordering.

The simplest policy: processes run in the order they arrived in the ready queue.
Reordering is the identity — the ready queue is already a FIFO.

Once dispatched, a process keeps the CPU until it finishes (no quantum).

Downside: a long-running process blocks everything behind it.
This is the "convoy effect".
"""

from models.process import ProcessDescriptor
from scheduler.base import AbstractOrderingPolicy


class FCFSPolicy(AbstractOrderingPolicy):

    def reorder(self, processes: list[ProcessDescriptor]) -> list[ProcessDescriptor]:
        return list(processes)

    @property
    def policy_name(self) -> str:
        return "fcfs"
