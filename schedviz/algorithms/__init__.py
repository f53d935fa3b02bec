"""
Scheduling algorithm implementations.

Every function takes ``(processes, config=None)`` and returns a fresh
``SchedulingResult`` without touching the caller's process objects.
"""

from .fcfs import schedule_fcfs
from .feedback import schedule_feedback, schedule_feedback_varying
from .priority import schedule_priority
from .round_robin import schedule_rr
from .sjf import schedule_sjf, schedule_srt

__all__ = [
    "schedule_fcfs",
    "schedule_feedback",
    "schedule_feedback_varying",
    "schedule_priority",
    "schedule_rr",
    "schedule_sjf",
    "schedule_srt",
]
