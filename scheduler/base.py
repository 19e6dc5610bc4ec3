"""
Abstract base class for all ordering policies (Strategy pattern).

The Strategy pattern lets you swap algorithms at runtime without changing
the code that uses them. ProcessScheduler only knows about AbstractOrderingPolicy —
it asks the policy to reorder the ready queue and never branches on the
policy name itself.

The set is closed: FCFS, SJF, Priority and Round Robin, wired together in
scheduler/registry.py.

Each policy answers three questions:
- reorder: given the READY processes, in what order should they wait?
- reorders_on_create / reorders_on_tick: when does the ready queue need re-sorting?
- quantum_expired: should the running process be sent back to READY?

reorder() must be a STABLE, pure function: it returns a new list and never
mutates the descriptors. Ties keep their previous relative order.
"""

from abc import ABC, abstractmethod

from models.process import ProcessDescriptor


class AbstractOrderingPolicy(ABC):

    # FCFS and Round Robin append at the tail and never need a full re-sort
    reorders_on_create: bool = False
    # Only policies whose ranking key can change as time passes re-sort per tick
    reorders_on_tick: bool = False

    @abstractmethod
    def reorder(self, processes: list[ProcessDescriptor]) -> list[ProcessDescriptor]:
        """Return the processes in dispatch order (head first)."""
        ...

    def quantum_expired(self, process: ProcessDescriptor) -> bool:
        """Whether the running process must give the CPU back after this tick."""
        return False

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'fcfs', 'sjf')."""
        ...
