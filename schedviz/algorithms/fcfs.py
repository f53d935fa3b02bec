from __future__ import annotations

from typing import List, Optional

from ..config import AlgorithmConfig, coerce_config
from ..metrics import build_result, finalize_process
from ..models import GanttItem, Process, SchedulingResult
from ._common import add_idle, add_slice, arrival_order, fresh_copies, record_dispatch, run_preemptive


def schedule_fcfs(processes: List[Process], config: Optional[AlgorithmConfig] = None) -> SchedulingResult:
    """
    First-Come First-Serve.

    Processes run in arrival order (input order on ties), each to completion.
    With ``is_preemptive`` set, the earliest-arrived unfinished process is
    re-selected at every arrival; this only matters for odd inputs and
    produces the same timeline otherwise.
    """
    config = coerce_config(config)
    procs = fresh_copies(processes)

    if config.preemptive:
        gantt = run_preemptive(procs, key=lambda p: ())
        return build_result(procs, gantt)

    time = 0
    gantt: List[GanttItem] = []

    for i in arrival_order(procs):
        p = procs[i]
        if time < p.arrival_time:
            add_idle(gantt, time, p.arrival_time)
            time = p.arrival_time

        record_dispatch(p, time)
        add_slice(gantt, p.pid, time, time + p.burst_time)
        time += p.burst_time
        finalize_process(p, time)

    return build_result(procs, gantt)
