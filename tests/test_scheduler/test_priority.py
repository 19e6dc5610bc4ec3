"""
Tests for Priority ordering.

Priority puts the HIGHEST priority number first (10 = most urgent).
Ties are broken by previous order.
"""

from models.process import ProcessDescriptor
from scheduler.priority import PriorityPolicy


def _make_process(pid: int, priority: int) -> ProcessDescriptor:
    return ProcessDescriptor(pid=pid, name=f"p{pid}", priority=priority, total_time=3)


def test_highest_priority_first():
    """Core guarantee: highest priority NUMBER = most urgent = head of the queue."""
    processes = [_make_process(1, 1), _make_process(2, 10), _make_process(3, 5)]

    ordered = PriorityPolicy().reorder(processes)

    assert [p.pid for p in ordered] == [2, 3, 1]


def test_equal_priority_preserves_order():
    processes = [_make_process(1, 5), _make_process(2, 5), _make_process(3, 5)]

    assert [p.pid for p in PriorityPolicy().reorder(processes)] == [1, 2, 3]


def test_mixed_priority_ordering():
    """Priorities {1, 4, 2, 5}: 5 leads, then 4, 2, 1."""
    processes = [
        _make_process(1, 1),
        _make_process(2, 4),
        _make_process(3, 2),
        _make_process(4, 5),
    ]

    assert [p.pid for p in PriorityPolicy().reorder(processes)] == [4, 2, 3, 1]


def test_reorder_sees_priority_changes():
    low = _make_process(1, 2)
    high = _make_process(2, 7)
    policy = PriorityPolicy()
    assert [p.pid for p in policy.reorder([low, high])] == [2, 1]

    low._change_priority(9)

    assert [p.pid for p in policy.reorder([low, high])] == [1, 2]


def test_resorts_on_create_and_tick():
    policy = PriorityPolicy()
    assert policy.reorders_on_create is True
    assert policy.reorders_on_tick is True


def test_policy_name():
    assert PriorityPolicy().policy_name == "priority"
