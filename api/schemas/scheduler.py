"""
Pydantic schemas for the /scheduler endpoints.

SchedulerConfig: request body for changing the active scheduling policy at runtime.
SchedulerStatus: response showing current scheduler state.
QueueMove / QueueInsert: operator overrides on the ready queue.
"""

from typing import Optional

from pydantic import BaseModel, Field

from models.enums import SchedulingPolicy


class SchedulerConfig(BaseModel):
    """Request body for PUT /scheduler/policy."""

    policy: SchedulingPolicy  # must be one of: fcfs, sjf, priority, round_robin


class SchedulerStatus(BaseModel):
    """Response body for GET /scheduler/status and the mutating scheduler endpoints."""

    current_policy: SchedulingPolicy
    current_time: int
    running_pid: Optional[int] = None
    ready_queue: list[int]       # pids, head first
    ready_queue_size: int
    ready_queue_summary: str     # "3(editor) 1(shell)" or "empty"
    auto_advance: bool           # is the periodic clock thread running?


class QueueMove(BaseModel):
    """Request body for POST /scheduler/ready-queue/front."""

    pid: int


class QueueInsert(BaseModel):
    """Request body for POST /scheduler/ready-queue/insert."""

    pid: int
    position: int = Field(..., ge=1, description="1-based position in the ready queue")
