"""
Priority-based ordering.

Processes with the HIGHEST priority number wait at the head (10 = most urgent,
1 = least). Equal priorities keep their previous relative order.

Like SJF, the queue is re-sorted after every creation and every tick, so a
priority changed through ProcessScheduler.update_priority() is picked up on
the next tick.

Downside: same starvation problem as SJF. Aging (gradually raising the
priority of waiting processes) would fix it; it is not modelled here.
"""

from models.process import ProcessDescriptor
from scheduler.base import AbstractOrderingPolicy


class PriorityPolicy(AbstractOrderingPolicy):

    reorders_on_create = True
    reorders_on_tick = True

    def reorder(self, processes: list[ProcessDescriptor]) -> list[ProcessDescriptor]:
        return sorted(processes, key=lambda p: p.priority, reverse=True)

    @property
    def policy_name(self) -> str:
        return "priority"
