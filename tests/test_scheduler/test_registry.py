"""Tests for the policy factory."""

import pytest

from models.enums import SchedulingPolicy
from scheduler.fcfs import FCFSPolicy
from scheduler.priority import PriorityPolicy
from scheduler.registry import create_policy
from scheduler.round_robin import RoundRobinPolicy
from scheduler.sjf import SJFPolicy


@pytest.mark.parametrize(
    "policy, expected",
    [
        (SchedulingPolicy.FCFS, FCFSPolicy),
        (SchedulingPolicy.SJF, SJFPolicy),
        (SchedulingPolicy.PRIORITY, PriorityPolicy),
        (SchedulingPolicy.ROUND_ROBIN, RoundRobinPolicy),
    ],
)
def test_creates_each_policy(policy, expected):
    assert isinstance(create_policy(policy), expected)


def test_accepts_string_value():
    assert isinstance(create_policy("round_robin"), RoundRobinPolicy)


def test_policy_name_round_trips_to_enum():
    for policy in SchedulingPolicy:
        assert create_policy(policy).policy_name == policy.value


def test_unknown_policy_raises():
    with pytest.raises(ValueError, match="Unknown scheduling policy"):
        create_policy("lottery")
