from __future__ import annotations

import heapq
from dataclasses import replace
from typing import Any, Callable, List, Optional, Tuple

from ..metrics import finalize_process
from ..models import IDLE_PID, GanttItem, Process

# Ordering key for a process under a given policy. The engine appends
# (arrival_time, input index) so ties always resolve the same way.
SelectionKey = Callable[[Process], Tuple[Any, ...]]


def fresh_copies(processes: List[Process]) -> List[Process]:
    """
    Copy the caller's processes with all derived fields reset, so the engine
    never touches caller-owned objects.
    """
    return [
        replace(
            p,
            remaining_time=p.burst_time,
            start_time=None,
            response_time=None,
            completion_time=None,
            turnaround_time=None,
            waiting_time=None,
        )
        for p in processes
    ]


def arrival_order(processes: List[Process]) -> List[int]:
    """
    Indices of ``processes`` sorted by arrival time; input order breaks ties.
    """
    return sorted(range(len(processes)), key=lambda i: processes[i].arrival_time)


def record_dispatch(process: Process, time: int) -> None:
    if process.start_time is None:
        process.start_time = time
        process.response_time = time - process.arrival_time


def add_idle(gantt: List[GanttItem], start: int, end: int) -> None:
    if end > start:
        gantt.append(GanttItem(pid=IDLE_PID, start_time=start, end_time=end, is_idle=True))


def add_slice(
    gantt: List[GanttItem],
    pid: str,
    start: int,
    end: int,
    merge: bool = False,
    queue_level: Optional[int] = None,
) -> None:
    """
    Append a run slice. With ``merge`` a slice that continues the previous
    one for the same process extends it instead of opening a new item.
    """
    if merge and gantt:
        last = gantt[-1]
        if not last.is_idle and last.pid == pid and last.end_time == start:
            last.end_time = end
            return
    gantt.append(GanttItem(pid=pid, start_time=start, end_time=end, queue_level=queue_level))


def run_nonpreemptive(processes: List[Process], key: SelectionKey) -> List[GanttItem]:
    """
    Repeatedly pick the best arrived process under ``key`` and run it to
    completion. Mutates ``processes`` (already fresh copies) in place.
    """
    pending = list(range(len(processes)))
    gantt: List[GanttItem] = []
    time = 0

    while pending:
        ready = [i for i in pending if processes[i].arrival_time <= time]

        if not ready:
            next_arrival = min(processes[i].arrival_time for i in pending)
            add_idle(gantt, time, next_arrival)
            time = next_arrival
            continue

        i = min(ready, key=lambda j: (key(processes[j]), processes[j].arrival_time, j))
        pending.remove(i)
        p = processes[i]

        record_dispatch(p, time)
        add_slice(gantt, p.pid, time, time + p.burst_time)
        time += p.burst_time
        finalize_process(p, time)

    return gantt


def run_preemptive(processes: List[Process], key: SelectionKey) -> List[GanttItem]:
    """
    Preemptive selection driven by arrival and completion events.

    Ready processes sit in a min-heap ordered by ``(key, arrival, index)``.
    The best one runs until it completes or the next process arrives,
    whichever comes first, then the choice is made again. Between two events
    only the running process changes and its key never gets worse, so this
    yields the same schedule as re-evaluating every time unit.
    """
    order = arrival_order(processes)
    n = len(processes)
    heap: List[Tuple[Tuple[Any, ...], int, int]] = []
    gantt: List[GanttItem] = []
    time = 0
    next_idx = 0
    done = 0

    def push(i: int) -> None:
        p = processes[i]
        heapq.heappush(heap, (key(p), p.arrival_time, i))

    while done < n:
        while next_idx < n and processes[order[next_idx]].arrival_time <= time:
            push(order[next_idx])
            next_idx += 1

        if not heap:
            next_arrival = processes[order[next_idx]].arrival_time
            add_idle(gantt, time, next_arrival)
            time = next_arrival
            continue

        _, _, i = heapq.heappop(heap)
        p = processes[i]
        record_dispatch(p, time)

        run_time = p.remaining_time
        if next_idx < n:
            run_time = min(run_time, processes[order[next_idx]].arrival_time - time)

        add_slice(gantt, p.pid, time, time + run_time, merge=True)
        time += run_time
        p.remaining_time -= run_time

        if p.remaining_time == 0:
            finalize_process(p, time)
            done += 1
        else:
            push(i)

    return gantt
