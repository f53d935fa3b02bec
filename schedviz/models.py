from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

IDLE_PID = "IDLE"


@dataclass
class Process:
    pid: str
    arrival_time: int
    burst_time: int
    priority: Optional[int] = None

    # Filled in by the engine, never by callers.
    remaining_time: Optional[int] = None
    start_time: Optional[int] = None
    response_time: Optional[int] = None
    completion_time: Optional[int] = None
    turnaround_time: Optional[int] = None
    waiting_time: Optional[int] = None

    @property
    def is_completed(self) -> bool:
        return self.completion_time is not None


@dataclass
class GanttItem:
    """
    One contiguous interval of the timeline, either a process or idle CPU.
    """

    pid: str
    start_time: int
    end_time: int
    is_idle: bool = False
    queue_level: Optional[int] = None

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass
class SchedulingResult:
    processes: List[Process] = field(default_factory=list)
    gantt_chart: List[GanttItem] = field(default_factory=list)
    average_waiting_time: float = 0.0
    average_turnaround_time: float = 0.0
    average_response_time: float = 0.0
    total_time: int = 0
    # Feedback algorithms only: queue contents (pids per level) at each dispatch.
    queue_levels: Optional[Dict[int, List[List[str]]]] = None


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    idle_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


@dataclass
class ComparisonRow:
    algorithm: str
    name: str
    result: SchedulingResult
    system: SystemMetrics


@dataclass
class QueueSnapshot:
    time: int
    waiting: List[Process] = field(default_factory=list)
    ready: List[Process] = field(default_factory=list)
    running: Optional[Process] = None
    completed: List[Process] = field(default_factory=list)
    queues: Optional[List[List[Process]]] = None


@dataclass
class QueueAnimation:
    algorithm: str
    total_time: int
    snapshots: List[QueueSnapshot] = field(default_factory=list)


@dataclass
class AnimationStep:
    time: int
    action: str  # arrive, start, preempt, complete, queue_move
    pid: str
    description: str
    from_queue: Optional[int] = None
    to_queue: Optional[int] = None
