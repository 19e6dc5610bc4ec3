"""
Scheduler control endpoints.

GET  /scheduler/status               → Policy, clock, running process, ready queue
PUT  /scheduler/policy               → Switch scheduling policy at runtime
POST /scheduler/tick?count=N         → Advance the clock N ticks
POST /scheduler/ready-queue/front    → Operator override: move a READY process to the head
POST /scheduler/ready-queue/insert   → Operator override: move a READY process to a position

Switching the policy re-sorts the current ready queue immediately; the
running process keeps the CPU. Manual queue edits are NOT re-applied later:
the next automatic re-sort (SJF/Priority) may undo them.

Handlers are plain `def`, so FastAPI runs them in its threadpool and a
wait on clock.lock (or a long /tick) never stalls the event loop.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_clock
from api.schemas.scheduler import QueueInsert, QueueMove, SchedulerConfig, SchedulerStatus
from driver.clock import SimulationClock

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


def _status(clock: SimulationClock) -> SchedulerStatus:
    """Build the status response. Caller must hold clock.lock."""
    scheduler = clock.scheduler
    running = scheduler.running_process
    return SchedulerStatus(
        current_policy=scheduler.policy,
        current_time=scheduler.current_time,
        running_pid=running.pid if running else None,
        ready_queue=scheduler.ready_queue,
        ready_queue_size=scheduler.ready_queue_size(),
        ready_queue_summary=scheduler.ready_queue_summary(),
        auto_advance=clock.is_running,
    )


@router.get("/status", response_model=SchedulerStatus)
def get_scheduler_status(
    clock: SimulationClock = Depends(get_clock),
) -> SchedulerStatus:
    with clock.lock:
        return _status(clock)


@router.put("/policy", response_model=SchedulerStatus)
def set_scheduling_policy(
    config: SchedulerConfig,
    clock: SimulationClock = Depends(get_clock),
) -> SchedulerStatus:
    """Switch the active scheduling policy. No restart required."""
    with clock.lock:
        clock.scheduler.set_policy(config.policy)
        return _status(clock)


@router.post("/tick", response_model=SchedulerStatus)
def advance_time(
    count: int = Query(1, ge=1, le=1000, description="Ticks to advance"),
    clock: SimulationClock = Depends(get_clock),
) -> SchedulerStatus:
    clock.tick(count)
    with clock.lock:
        return _status(clock)


@router.post("/ready-queue/front", response_model=SchedulerStatus)
def move_to_front(
    move: QueueMove,
    clock: SimulationClock = Depends(get_clock),
) -> SchedulerStatus:
    with clock.lock:
        if clock.scheduler.find_by_id(move.pid) is None:
            raise HTTPException(status_code=404, detail=f"Process {move.pid} not found")
        if not clock.scheduler.move_to_front(move.pid):
            raise HTTPException(status_code=409, detail=f"Process {move.pid} is not READY")
        return _status(clock)


@router.post("/ready-queue/insert", response_model=SchedulerStatus)
def insert_at(
    insert: QueueInsert,
    clock: SimulationClock = Depends(get_clock),
) -> SchedulerStatus:
    with clock.lock:
        if clock.scheduler.find_by_id(insert.pid) is None:
            raise HTTPException(status_code=404, detail=f"Process {insert.pid} not found")
        if not clock.scheduler.insert_at(insert.pid, insert.position):
            raise HTTPException(
                status_code=409,
                detail=f"Cannot place process {insert.pid} at position {insert.position}",
            )
        return _status(clock)
