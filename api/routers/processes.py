"""
Process endpoints.

POST   /processes/                  → Create a process (READY, appended to the ready queue)
POST   /processes/bulk              → Create many from loader-format text
GET    /processes/                  → Snapshot of all processes (optionally ?name=...)
GET    /processes/{pid}             → One process
DELETE /processes/{pid}             → Destroy a process, whatever its state
PUT    /processes/{pid}/priority    → Change priority
PUT    /processes/{pid}/total-time  → Change total time

The API layer is intentionally thin:
- Validate input (Pydantic does this automatically)
- Call the scheduler under the clock's lock
- Turn False/None results into 404/409 responses

It does NOT advance time; that's POST /scheduler/tick or the clock thread.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_clock
from api.schemas.process import (
    BulkCreateResponse,
    PriorityUpdate,
    ProcessBulkCreate,
    ProcessCreate,
    ProcessResponse,
    TotalTimeUpdate,
)
from driver.clock import SimulationClock
from loaders.sample_data import parse_lines

router = APIRouter(prefix="/processes", tags=["processes"])


@router.post("/", response_model=ProcessResponse, status_code=201)
def create_process(
    process_in: ProcessCreate,
    clock: SimulationClock = Depends(get_clock),
) -> ProcessResponse:
    """
    Create a new process.

    Under SJF and Priority the ready queue is re-sorted right away;
    under FCFS and Round Robin the process simply joins the tail.
    """
    with clock.lock:
        process = clock.scheduler.create_process(
            process_in.name, process_in.priority, process_in.total_time
        )
        if process is None:
            raise HTTPException(status_code=422, detail="Process rejected by scheduler")
        return ProcessResponse.model_validate(process)


@router.post("/bulk", response_model=BulkCreateResponse, status_code=201)
def create_processes_bulk(
    bulk_in: ProcessBulkCreate,
    clock: SimulationClock = Depends(get_clock),
) -> BulkCreateResponse:
    """
    Create processes from `name,priority,total_time` lines.

    Comments, blank lines and malformed lines are skipped (same rules
    as the sample data file), so the response says how many made it.
    """
    specs = parse_lines(bulk_in.lines.splitlines())

    created = []
    with clock.lock:
        for spec in specs:
            process = clock.scheduler.create_process(spec.name, spec.priority, spec.total_time)
            if process is not None:
                created.append(ProcessResponse.model_validate(process))

    return BulkCreateResponse(created=len(created), processes=created)


@router.get("/", response_model=list[ProcessResponse])
def list_processes(
    name: Optional[str] = Query(None, description="Only processes with exactly this name"),
    clock: SimulationClock = Depends(get_clock),
) -> list[ProcessResponse]:
    """All known processes in creation order. Destroyed processes are gone; finished ones stay."""
    with clock.lock:
        if name is not None:
            processes = clock.scheduler.find_all_by_name(name)
        else:
            processes = clock.scheduler.all_processes()
        return [ProcessResponse.model_validate(p) for p in processes]


@router.get("/{pid}", response_model=ProcessResponse)
def get_process(
    pid: int,
    clock: SimulationClock = Depends(get_clock),
) -> ProcessResponse:
    with clock.lock:
        process = clock.scheduler.find_by_id(pid)
        if process is None:
            raise HTTPException(status_code=404, detail=f"Process {pid} not found")
        return ProcessResponse.model_validate(process)


@router.delete("/{pid}", status_code=204)
def destroy_process(
    pid: int,
    clock: SimulationClock = Depends(get_clock),
) -> None:
    """
    Destroy a process immediately.

    Unlike a finished process, a destroyed one is removed from the registry,
    so GET /processes/{pid} returns 404 afterwards.
    """
    with clock.lock:
        if not clock.scheduler.destroy_process(pid):
            raise HTTPException(status_code=404, detail=f"Process {pid} not found")


@router.put("/{pid}/priority", response_model=ProcessResponse)
def update_priority(
    pid: int,
    update: PriorityUpdate,
    clock: SimulationClock = Depends(get_clock),
) -> ProcessResponse:
    with clock.lock:
        if clock.scheduler.find_by_id(pid) is None:
            raise HTTPException(status_code=404, detail=f"Process {pid} not found")
        if not clock.scheduler.update_priority(pid, update.priority):
            raise HTTPException(status_code=409, detail="Priority rejected")
        return ProcessResponse.model_validate(clock.scheduler.find_by_id(pid))


@router.put("/{pid}/total-time", response_model=ProcessResponse)
def update_total_time(
    pid: int,
    update: TotalTimeUpdate,
    clock: SimulationClock = Depends(get_clock),
) -> ProcessResponse:
    """Change total time. 409 if it would drop below the time already used or the process has finished."""
    with clock.lock:
        process = clock.scheduler.find_by_id(pid)
        if process is None:
            raise HTTPException(status_code=404, detail=f"Process {pid} not found")
        if not clock.scheduler.update_total_time(pid, update.total_time):
            raise HTTPException(
                status_code=409,
                detail=f"total_time {update.total_time} rejected for process {pid} ({process.state.value}, elapsed {process.elapsed_time})",
            )
        return ProcessResponse.model_validate(process)
