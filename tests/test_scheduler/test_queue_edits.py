"""
Tests for the manual ready-queue edits: move_to_front() and insert_at().

These are operator overrides. They only apply to READY processes, keep
everyone else in their relative order, and are not re-applied by the
automatic re-sorts.
"""

from models.enums import SchedulingPolicy
from scheduler.core import ProcessScheduler


def _fcfs_with(count: int) -> ProcessScheduler:
    scheduler = ProcessScheduler(policy=SchedulingPolicy.FCFS)
    for i in range(1, count + 1):
        scheduler.create_process(f"Process{i}", 5, 5)
    return scheduler


def test_move_to_front():
    scheduler = _fcfs_with(3)
    scheduler.advance_one_tick()
    assert scheduler.ready_queue_size() == 2

    assert scheduler.move_to_front(3)

    assert scheduler.ready_queue == [3, 2]


def test_move_to_front_changes_next_dispatch():
    scheduler = _fcfs_with(3)
    assert scheduler.move_to_front(3)

    scheduler.advance_one_tick()

    assert scheduler.running_process.pid == 3
    assert scheduler.ready_queue == [1, 2]


def test_move_to_front_rejects_running_and_unknown():
    scheduler = _fcfs_with(2)
    scheduler.advance_one_tick()

    assert not scheduler.move_to_front(1)   # RUNNING
    assert not scheduler.move_to_front(99)  # unknown
    assert scheduler.ready_queue == [2]


def test_move_to_front_rejects_terminated():
    scheduler = ProcessScheduler(policy=SchedulingPolicy.FCFS)
    quick = scheduler.create_process("quick", 5, 1)
    scheduler.create_process("other", 5, 5)
    scheduler.advance_one_tick()
    scheduler.advance_one_tick()

    assert not scheduler.move_to_front(quick.pid)


def test_insert_at_positions():
    scheduler = _fcfs_with(4)

    assert scheduler.insert_at(4, 1)
    assert scheduler.ready_queue == [4, 1, 2, 3]

    assert scheduler.insert_at(1, 4)
    assert scheduler.ready_queue == [4, 2, 3, 1]

    # size + 1 is allowed and means "the tail"
    assert scheduler.insert_at(2, 5)
    assert scheduler.ready_queue == [4, 3, 1, 2]


def test_insert_at_rejects_out_of_range_positions():
    scheduler = _fcfs_with(3)

    assert not scheduler.insert_at(1, 0)
    assert not scheduler.insert_at(1, 5)
    assert not scheduler.insert_at(1, -1)
    assert scheduler.ready_queue == [1, 2, 3]


def test_insert_at_rejects_non_ready_and_unknown():
    scheduler = _fcfs_with(3)
    scheduler.advance_one_tick()

    assert not scheduler.insert_at(1, 1)    # RUNNING
    assert not scheduler.insert_at(42, 1)   # unknown
    assert scheduler.ready_queue == [2, 3]


def test_manual_order_survives_fcfs_ticks():
    scheduler = _fcfs_with(3)
    scheduler.advance_one_tick()
    scheduler.move_to_front(3)

    scheduler.advance_one_tick()

    assert scheduler.ready_queue == [3, 2]


def test_manual_order_is_overridden_by_next_priority_resort():
    scheduler = ProcessScheduler(policy=SchedulingPolicy.PRIORITY)
    scheduler.create_process("runner", 10, 5)
    high = scheduler.create_process("high", 8, 5)
    low = scheduler.create_process("low", 2, 5)
    scheduler.advance_one_tick()

    assert scheduler.move_to_front(low.pid)
    assert scheduler.ready_queue == [low.pid, high.pid]

    scheduler.advance_one_tick()
    assert scheduler.ready_queue == [high.pid, low.pid]
