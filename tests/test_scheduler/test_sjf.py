"""
Tests for SJF (Shortest Job First) ordering.

SJF puts the smallest REMAINING time (total - elapsed) first.
Ties are broken by previous order (sorted() is stable).
"""

from models.process import ProcessDescriptor
from scheduler.sjf import SJFPolicy


def _make_process(pid: int, total_time: int) -> ProcessDescriptor:
    return ProcessDescriptor(pid=pid, name=f"p{pid}", priority=5, total_time=total_time)


def test_shortest_first():
    """Core SJF guarantee: shortest remaining time comes out first."""
    processes = [_make_process(1, 10), _make_process(2, 1), _make_process(3, 5)]

    ordered = SJFPolicy().reorder(processes)

    assert [p.pid for p in ordered] == [2, 3, 1]


def test_equal_remaining_time_preserves_order():
    processes = [_make_process(1, 3), _make_process(2, 3), _make_process(3, 3)]

    assert [p.pid for p in SJFPolicy().reorder(processes)] == [1, 2, 3]


def test_uses_remaining_not_total_time():
    """A long process that has mostly run beats a fresh shorter one."""
    almost_done = _make_process(1, 10)
    for _ in range(8):
        almost_done._advance_one_tick()  # remaining = 2
    fresh = _make_process(2, 3)

    ordered = SJFPolicy().reorder([fresh, almost_done])

    assert [p.pid for p in ordered] == [1, 2]


def test_sample_workload_order():
    """Remaining times {5, 5, 1, 4}: the 1 leads, then the 4, then the fives in order."""
    processes = [
        _make_process(1, 5),
        _make_process(2, 5),
        _make_process(3, 1),
        _make_process(4, 4),
    ]

    assert [p.pid for p in SJFPolicy().reorder(processes)] == [3, 4, 1, 2]


def test_resorts_on_create_and_tick():
    policy = SJFPolicy()
    assert policy.reorders_on_create is True
    assert policy.reorders_on_tick is True


def test_policy_name():
    assert SJFPolicy().policy_name == "sjf"
