"""
Policy comparison — runs the same workload under each scheduling policy.

How it works:
1. Build a fresh ProcessScheduler with the policy
2. Create every process in the workload (all arrive at t=0)
3. Tick until the scheduler is idle, recording the tick each process finished
4. Report: total ticks, mean turnaround, mean waiting time, dispatch count

Everything runs in-process on the simulated clock, so results are exact
and repeatable: no API or wall-clock timing involved.

    turnaround = tick the process finished
    waiting    = turnaround - total_time - 1 (the dispatch tick runs no work)
"""

from models.enums import ProcessState, SchedulingPolicy
from loaders.sample_data import ProcessSpec
from scheduler.core import ProcessScheduler


class PolicyComparison:

    def __init__(self, workload: list[ProcessSpec], time_slice: int = 2, max_ticks: int = 100_000):
        self.workload = workload
        self.time_slice = time_slice
        self.max_ticks = max_ticks

    def run(self, policy: SchedulingPolicy | str) -> dict:
        """Run the workload under a single policy."""
        scheduler = ProcessScheduler(policy=policy, time_slice=self.time_slice)
        pids = []
        for spec in self.workload:
            process = scheduler.create_process(spec.name, spec.priority, spec.total_time)
            if process is not None:
                pids.append(process.pid)

        finished_at: dict[int, int] = {}
        while not scheduler.is_idle:
            if scheduler.current_time >= self.max_ticks:
                raise TimeoutError(f"Workload didn't finish within {self.max_ticks} ticks")
            scheduler.advance_one_tick()
            for pid in pids:
                process = scheduler.find_by_id(pid)
                if pid not in finished_at and process.state == ProcessState.TERMINATED:
                    finished_at[pid] = scheduler.current_time

        turnaround = [finished_at[pid] for pid in pids]
        waiting = [
            finished_at[pid] - scheduler.find_by_id(pid).total_time - 1 for pid in pids
        ]
        count = len(pids) or 1

        return {
            "policy": scheduler.policy.value,
            "num_processes": len(pids),
            "total_ticks": scheduler.current_time,
            "avg_turnaround": round(sum(turnaround) / count, 2),
            "avg_waiting": round(sum(waiting) / count, 2),
            "dispatches": scheduler.dispatch_count,
        }

    def run_all_policies(self) -> list[dict]:
        """Compare all 4 policies on the same workload."""
        return [self.run(policy) for policy in SchedulingPolicy]
