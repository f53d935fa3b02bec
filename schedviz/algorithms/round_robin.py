from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from ..config import AlgorithmConfig, coerce_config
from ..metrics import build_result, finalize_process
from ..models import GanttItem, Process, SchedulingResult
from ._common import add_idle, add_slice, arrival_order, fresh_copies, record_dispatch


def schedule_rr(processes: List[Process], config: Optional[AlgorithmConfig] = None) -> SchedulingResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes that arrive while a slice runs (or exactly when it ends) join
    the tail of the ready queue before the preempted process does.
    """
    quantum = coerce_config(config).time_quantum
    procs = fresh_copies(processes)
    order = arrival_order(procs)
    n = len(procs)

    ready: Deque[int] = deque()
    gantt: List[GanttItem] = []
    time = 0
    next_idx = 0

    def enqueue_new_arrivals(current_time: int) -> None:
        nonlocal next_idx
        while next_idx < n and procs[order[next_idx]].arrival_time <= current_time:
            ready.append(order[next_idx])
            next_idx += 1

    while ready or next_idx < n:
        enqueue_new_arrivals(time)

        if not ready:
            # CPU idles until the next arrival
            next_arrival = procs[order[next_idx]].arrival_time
            add_idle(gantt, time, next_arrival)
            time = next_arrival
            continue

        i = ready.popleft()
        p = procs[i]
        record_dispatch(p, time)

        run_time = min(quantum, p.remaining_time)
        add_slice(gantt, p.pid, time, time + run_time)
        time += run_time
        p.remaining_time -= run_time

        enqueue_new_arrivals(time)

        if p.remaining_time > 0:
            ready.append(i)
        else:
            finalize_process(p, time)

    return build_result(procs, gantt)
