"""
Shortest Job First (SJF) ordering.

Processes with the smallest REMAINING time (total_time - elapsed_time) wait
at the head of the ready queue.

The key is recomputed on every reorganization: after each creation and after
each tick. There is no explicit preemption signal, a waiting process simply
loses its head position when another one becomes shorter. The running
process itself is never interrupted by this policy.

sorted() is stable, so equal remaining times keep their previous order
(arrival order for fresh processes).

Downside: starvation — a long process might never run if short ones keep arriving.
"""

from models.process import ProcessDescriptor
from scheduler.base import AbstractOrderingPolicy


class SJFPolicy(AbstractOrderingPolicy):

    reorders_on_create = True
    reorders_on_tick = True

    def reorder(self, processes: list[ProcessDescriptor]) -> list[ProcessDescriptor]:
        return sorted(processes, key=lambda p: p.remaining_time)

    @property
    def policy_name(self) -> str:
        return "sjf"
