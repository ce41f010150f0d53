from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Process:
    """
    One unit of schedulable work. Lower ``priority`` means more important.
    """

    pid: int
    burst_time: int
    arrival_time: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.pid < 0:
            raise ValueError(f"pid must be non-negative, got {self.pid}")
        if self.arrival_time < 0:
            raise ValueError(f"arrival_time must be non-negative, got {self.arrival_time}")
        if self.burst_time < 1:
            raise ValueError(f"burst_time must be at least 1, got {self.burst_time}")


@dataclass
class ScheduledSlice:
    """
    One interval in the timeline diagram.

    For the preemptive schedulers ``end_time`` is the running maximum
    completion time seen so far, not the end of a single dispatch.
    """

    pid: int
    start_time: int
    end_time: int


@dataclass
class ProcessMetrics:
    pid: int
    priority: int
    burst_time: int
    arrival_time: int
    waiting_time: int
    turnaround_time: int
    completion_time: int


@dataclass
class ScheduleSummary:
    avg_waiting: float
    avg_turnaround: float
    throughput: float
    makespan: int


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[ProcessMetrics] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    summary: Optional[ScheduleSummary] = None
