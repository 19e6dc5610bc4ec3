"""
Policy factory — maps policy names to ordering policy classes.

This is the Factory pattern: instead of writing if/elif chains everywhere,
there is ONE place that knows how to create policies. ProcessScheduler,
the API and the benchmark all go through create_policy().
"""

from models.enums import SchedulingPolicy
from scheduler.base import AbstractOrderingPolicy
from scheduler.fcfs import FCFSPolicy
from scheduler.sjf import SJFPolicy
from scheduler.priority import PriorityPolicy
from scheduler.round_robin import RoundRobinPolicy


_REGISTRY: dict[SchedulingPolicy, type[AbstractOrderingPolicy]] = {
    SchedulingPolicy.FCFS: FCFSPolicy,
    SchedulingPolicy.SJF: SJFPolicy,
    SchedulingPolicy.PRIORITY: PriorityPolicy,
    SchedulingPolicy.ROUND_ROBIN: RoundRobinPolicy,
}


def create_policy(policy: SchedulingPolicy | str) -> AbstractOrderingPolicy:
    """
    Create an ordering policy for the given name.

    Accepts the enum member or its string value:
        create_policy(SchedulingPolicy.SJF)
        create_policy("round_robin")

    Raises ValueError for anything else.
    """
    try:
        key = SchedulingPolicy(policy)
    except ValueError:
        raise ValueError(f"Unknown scheduling policy: {policy}") from None

    return _REGISTRY[key]()
