"""
schedviz package.

Simulates classic CPU scheduling algorithms (FCFS, RR, SJF, SRT, Priority,
multilevel feedback) and derives the data needed to visualize them: Gantt
timelines, per-process metrics and stepped queue snapshots.
"""

from .animation import build_animation, build_events, generate_animation
from .config import AlgorithmConfig
from .errors import SchedulerError, UnknownAlgorithmError, WorkloadError
from .models import GanttItem, Process, QueueAnimation, QueueSnapshot, SchedulingResult
from .scheduler import ALGORITHM_DESCRIPTIONS, ALGORITHM_NAMES, ALGORITHMS, compare_algorithms, run

__all__ = [
    "ALGORITHMS",
    "ALGORITHM_DESCRIPTIONS",
    "ALGORITHM_NAMES",
    "AlgorithmConfig",
    "GanttItem",
    "Process",
    "QueueAnimation",
    "QueueSnapshot",
    "SchedulerError",
    "SchedulingResult",
    "UnknownAlgorithmError",
    "WorkloadError",
    "build_animation",
    "build_events",
    "compare_algorithms",
    "generate_animation",
    "run",
]
