from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, Dict, List, Optional

from ..config import AlgorithmConfig, coerce_config
from ..metrics import build_result, finalize_process
from ..models import GanttItem, Process, SchedulingResult
from ._common import add_idle, add_slice, arrival_order, fresh_copies, record_dispatch

logger = logging.getLogger(__name__)


def schedule_feedback(processes: List[Process], config: Optional[AlgorithmConfig] = None) -> SchedulingResult:
    """
    Multilevel Feedback with quantum ``2**level`` (1, 2, 4, ...).
    """
    levels = coerce_config(config).number_of_queues
    return _run_feedback(processes, levels, lambda level: 2 ** level)


def schedule_feedback_varying(processes: List[Process], config: Optional[AlgorithmConfig] = None) -> SchedulingResult:
    """
    Feedback with a varying quantum: ``time_quantum * quantum_multiplier**level``.
    """
    config = coerce_config(config)
    base, multiplier = config.time_quantum, config.quantum_multiplier
    return _run_feedback(processes, config.number_of_queues, lambda level: base * multiplier ** level)


def _run_feedback(
    processes: List[Process],
    number_of_queues: int,
    quantum_for: Callable[[int], int],
) -> SchedulingResult:
    """
    Shared multilevel feedback loop.

    - New arrivals always enter level 0.
    - The lowest-indexed non-empty level is served first, FIFO within it.
    - A process that uses its whole quantum without finishing is demoted one
      level (the last level keeps it) and goes to that level's tail, behind
      anything that arrived during its slice.
    """
    procs = fresh_copies(processes)
    order = arrival_order(procs)
    n = len(procs)

    queues: List[Deque[int]] = [deque() for _ in range(number_of_queues)]
    gantt: List[GanttItem] = []
    queue_levels: Dict[int, List[List[str]]] = {}
    time = 0
    next_idx = 0

    def enqueue_new_arrivals(current_time: int) -> None:
        nonlocal next_idx
        while next_idx < n and procs[order[next_idx]].arrival_time <= current_time:
            queues[0].append(order[next_idx])
            next_idx += 1

    while next_idx < n or any(queues):
        enqueue_new_arrivals(time)

        level = next((lvl for lvl, q in enumerate(queues) if q), None)
        if level is None:
            next_arrival = procs[order[next_idx]].arrival_time
            add_idle(gantt, time, next_arrival)
            time = next_arrival
            continue

        i = queues[level].popleft()
        p = procs[i]
        record_dispatch(p, time)
        queue_levels[time] = [[procs[j].pid for j in q] for q in queues]

        run_time = min(quantum_for(level), p.remaining_time)
        add_slice(gantt, p.pid, time, time + run_time, queue_level=level)
        time += run_time
        p.remaining_time -= run_time

        enqueue_new_arrivals(time)

        if p.remaining_time > 0:
            next_level = min(level + 1, number_of_queues - 1)
            if next_level != level:
                logger.debug("t=%d: demoted %s from Q%d to Q%d", time, p.pid, level, next_level)
            queues[next_level].append(i)
        else:
            finalize_process(p, time)

    return build_result(procs, gantt, queue_levels=queue_levels)
