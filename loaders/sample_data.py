"""
Sample data loader — bulk-creates processes from a text file.

File format: one process per line, comma separated:

    # name,priority,total_time
    editor,5,10
    compiler,3,8

- Lines starting with '#' and blank lines are skipped
- Fields are stripped, so "editor , 5 , 10" is fine
- A malformed line (wrong field count, non-integer, rejected by the
  scheduler) is logged and skipped; the rest of the file still loads

Each valid line becomes exactly one ProcessScheduler.create_process() call,
in file order, so pids follow line order.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from scheduler.core import ProcessScheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessSpec:
    """One parsed line: the arguments for create_process()."""
    name: str
    priority: int
    total_time: int


def parse_lines(lines: Iterable[str]) -> list[ProcessSpec]:
    """Parse loader lines into ProcessSpecs, skipping comments, blanks and bad lines."""
    specs = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        parts = [part.strip() for part in line.split(",")]
        if len(parts) != 3:
            logger.warning(f"Line {line_no}: expected name,priority,total_time, got {line!r}")
            continue

        name, priority, total_time = parts
        try:
            specs.append(ProcessSpec(name, int(priority), int(total_time)))
        except ValueError:
            logger.warning(f"Line {line_no}: priority and total_time must be integers, got {line!r}")
    return specs


def load_lines(scheduler: ProcessScheduler, lines: Iterable[str]) -> int:
    """Create one process per valid line. Returns how many were created."""
    created = 0
    for spec in parse_lines(lines):
        if scheduler.create_process(spec.name, spec.priority, spec.total_time) is None:
            logger.warning(f"Scheduler rejected {spec}")
            continue
        created += 1
    return created


def load_sample_data(scheduler: ProcessScheduler, path: str | Path) -> int:
    """
    Load a sample file into the scheduler.

    Raises FileNotFoundError if the file doesn't exist. A missing data
    file is a configuration mistake, not a line to skip.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        created = load_lines(scheduler, f)

    logger.info(f"Loaded {created} processes from {path}")
    return created
