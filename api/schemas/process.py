"""
Pydantic schemas for the /processes endpoints.

These are NOT the scheduler's descriptors — they define the HTTP API contract:
- ProcessCreate: what the user sends to create a process (request body)
- ProcessBulkCreate: loader-format text, one process per line
- PriorityUpdate / TotalTimeUpdate: bodies for the edit endpoints
- ProcessResponse: what we send back for a single process

FastAPI validates incoming data against these automatically.
If someone sends priority=99, FastAPI returns a 422 error before the scheduler is touched.
"""

from pydantic import BaseModel, Field

from models.enums import ProcessState


class ProcessCreate(BaseModel):
    """Request body for POST /processes/."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        examples=["editor"],
    )
    priority: int = Field(
        default=5,
        ge=1,
        le=10,
        description="1 = least urgent, 10 = most urgent",
    )
    total_time: int = Field(
        ...,
        gt=0,
        description="CPU ticks the process needs to finish",
    )


class ProcessBulkCreate(BaseModel):
    """Request body for POST /processes/bulk — same format as the sample data file."""

    lines: str = Field(..., examples=["# name,priority,total_time\neditor,5,10\nshell,3,4"])


class PriorityUpdate(BaseModel):
    priority: int = Field(..., ge=1, le=10)


class TotalTimeUpdate(BaseModel):
    total_time: int = Field(..., gt=0)


class ProcessResponse(BaseModel):
    """Response body for a single process."""

    pid: int
    name: str
    state: ProcessState
    priority: int
    total_time: int
    elapsed_time: int
    remaining_time: int
    time_slice: int

    # from_attributes=True lets Pydantic read the descriptor's properties
    # (e.g., process.name) instead of requiring a dict
    model_config = {"from_attributes": True}


class BulkCreateResponse(BaseModel):
    created: int
    processes: list[ProcessResponse]
