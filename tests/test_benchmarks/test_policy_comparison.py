"""Tests for the in-process policy comparison."""

from benchmarks.policy_comparison import PolicyComparison
from loaders.sample_data import ProcessSpec

WORKLOAD = [
    ProcessSpec("Process1", 1, 5),
    ProcessSpec("Process2", 4, 5),
    ProcessSpec("Process3", 2, 1),
    ProcessSpec("Process4", 5, 4),
]


def test_fcfs_numbers():
    result = PolicyComparison(WORKLOAD).run("fcfs")

    # finishes at t=6, 11, 12, 16
    assert result["policy"] == "fcfs"
    assert result["num_processes"] == 4
    assert result["total_ticks"] == 16
    assert result["avg_turnaround"] == 11.25
    assert result["dispatches"] == 4


def test_sjf_beats_fcfs_on_turnaround():
    bench = PolicyComparison(WORKLOAD)
    assert bench.run("sjf")["avg_turnaround"] < bench.run("fcfs")["avg_turnaround"]


def test_round_robin_dispatches_more():
    bench = PolicyComparison(WORKLOAD)
    assert bench.run("round_robin")["dispatches"] == 9
    assert bench.run("fcfs")["dispatches"] == 4


def test_all_policies_do_the_same_work():
    results = PolicyComparison(WORKLOAD).run_all_policies()

    assert [r["policy"] for r in results] == ["fcfs", "sjf", "priority", "round_robin"]
    # No idle ticks between processes, so every policy needs 1 + total work
    assert all(r["total_ticks"] == 16 for r in results)
