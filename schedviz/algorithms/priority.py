from __future__ import annotations

from typing import Any, List, Optional, Tuple

from ..config import AlgorithmConfig, coerce_config
from ..metrics import build_result
from ..models import Process, SchedulingResult
from ._common import SelectionKey, fresh_copies, run_nonpreemptive, run_preemptive


def priority_key(high_is_min: bool = True) -> SelectionKey:
    """
    Ranking key for priority selection.

    Processes without a priority never beat one that has a priority; among
    themselves they fall back to arrival order.

    This ranking is a deliberate product choice and has not been confirmed.
    The earlier UI skipped the comparison whenever either side had no
    priority, so the first process considered won and an all-unset workload
    ran in scan order. Do not restore that behaviour without a product
    decision.
    """

    def key(p: Process) -> Tuple[Any, ...]:
        if p.priority is None:
            return (1, 0)
        return (0, p.priority if high_is_min else -p.priority)

    return key


def schedule_priority(processes: List[Process], config: Optional[AlgorithmConfig] = None) -> SchedulingResult:
    """
    Priority scheduling, non-preemptive by default.

    ``priority_high_is_min`` (default) means a numerically lower value is
    more urgent; turn it off to make higher values win. The preemptive
    variant re-selects among all ready processes, the running one included,
    whenever a new process arrives.
    """
    config = coerce_config(config)
    key = priority_key(config.priority_high_is_min)
    procs = fresh_copies(processes)

    if config.preemptive:
        gantt = run_preemptive(procs, key)
    else:
        gantt = run_nonpreemptive(procs, key)

    return build_result(procs, gantt)
