"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("READY", not "ProcessState.READY")
- They work as FastAPI query parameters and request fields
- Typos become immediate errors instead of silent bugs
"""

import enum


class ProcessState(str, enum.Enum):
    NEW = "NEW"                # just built, not yet in the ready queue
    READY = "READY"            # waiting in the ready queue for the CPU
    RUNNING = "RUNNING"        # holds the virtual CPU (at most one at a time)
    WAITING = "WAITING"        # reserved for I/O waits, never entered today
    TERMINATED = "TERMINATED"  # finished or destroyed, never left again


class SchedulingPolicy(str, enum.Enum):
    FCFS = "fcfs"              # First Come First Served: insertion order
    SJF = "sjf"                # Shortest Job First: ascending remaining time
    PRIORITY = "priority"      # Priority: descending priority (10 = most urgent)
    ROUND_ROBIN = "round_robin"  # Round Robin: insertion order + quantum requeue
