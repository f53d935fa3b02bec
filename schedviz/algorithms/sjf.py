from __future__ import annotations

from typing import List, Optional

from ..config import AlgorithmConfig, coerce_config
from ..metrics import build_result
from ..models import Process, SchedulingResult
from ._common import fresh_copies, run_nonpreemptive, run_preemptive


def schedule_sjf(processes: List[Process], config: Optional[AlgorithmConfig] = None) -> SchedulingResult:
    """
    Shortest Job First (also known as Shortest Process Next).

    At each decision point, among processes that have arrived and not yet
    run, choose the one with the smallest burst time (ties: earlier arrival,
    then input order). With ``is_preemptive`` set this becomes SRT.
    """
    if coerce_config(config).preemptive:
        return schedule_srt(processes, config)

    procs = fresh_copies(processes)
    gantt = run_nonpreemptive(procs, key=lambda p: (p.burst_time,))
    return build_result(procs, gantt)


def schedule_srt(processes: List[Process], config: Optional[AlgorithmConfig] = None) -> SchedulingResult:
    """
    Shortest Remaining Time (preemptive SJF).
    """
    procs = fresh_copies(processes)
    gantt = run_preemptive(procs, key=lambda p: (p.remaining_time,))
    return build_result(procs, gantt)
