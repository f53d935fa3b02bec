from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from .algorithms import (
    schedule_fcfs,
    schedule_feedback,
    schedule_feedback_varying,
    schedule_priority,
    schedule_rr,
    schedule_sjf,
    schedule_srt,
)
from .config import AlgorithmConfig, coerce_config
from .errors import UnknownAlgorithmError
from .metrics import compute_system_metrics
from .models import ComparisonRow, Process, SchedulingResult

logger = logging.getLogger(__name__)

AlgorithmFunc = Callable[[List[Process], Optional[AlgorithmConfig]], SchedulingResult]
ConfigLike = Union[AlgorithmConfig, Mapping[str, Any], None]

ALGORITHMS: Mapping[str, AlgorithmFunc] = MappingProxyType(
    {
        "FCFS": schedule_fcfs,
        "RR": schedule_rr,
        "SJF": schedule_sjf,
        "SRT": schedule_srt,
        "PRIORITY": schedule_priority,
        "FB": schedule_feedback,
        "FBV": schedule_feedback_varying,
    }
)

_ALIASES = MappingProxyType({"SPN": "SJF", "SRTF": "SRT", "MLFQ": "FB"})

_NON_PREEMPTIVE_IN_COMPARISON = frozenset({"FCFS", "SJF"})

ALGORITHM_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "FCFS": "First Come First Serve",
        "RR": "Round Robin",
        "SJF": "Shortest Job First",
        "SRT": "Shortest Remaining Time",
        "PRIORITY": "Priority Scheduling",
        "FB": "Multilevel Feedback",
        "FBV": "Feedback (Varying Quantum)",
    }
)

ALGORITHM_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "FCFS": "Processes jobs in order of arrival (non-preemptive)",
        "RR": "Fixed time quantum for fair CPU sharing (preemptive)",
        "SJF": "Selects the shortest job first (non-preemptive)",
        "SRT": "Always runs the job with the least remaining time (preemptive)",
        "PRIORITY": "Schedules based on priority; choose min or max as highest",
        "FB": "Multiple queues with quantum 2^level; long jobs sink to lower levels",
        "FBV": "Multiple queues with quantum q*m^level; long jobs sink to lower levels",
    }
)


def resolve_algorithm(name: str) -> str:
    """
    Normalize an algorithm identifier to its canonical tag.
    """
    tag = name.strip().upper()
    tag = _ALIASES.get(tag, tag)
    if tag not in ALGORITHMS:
        raise UnknownAlgorithmError(name)
    return tag


def run(algorithm: str, processes: List[Process], config: ConfigLike = None) -> SchedulingResult:
    """
    Dispatch to the requested algorithm.

    Only the algorithm name is validated here; the process list is expected
    to be checked by the caller (see ``workload_io.validate_processes``).
    """
    tag = resolve_algorithm(algorithm)
    cfg = coerce_config(config)
    logger.debug("Running %s on %d processes with %r", tag, len(processes), cfg)
    return ALGORITHMS[tag](list(processes), cfg)


def compare_algorithms(
    processes: List[Process],
    algorithms: Iterable[str] = ("FCFS", "RR", "SJF", "PRIORITY"),
    config: ConfigLike = None,
) -> List[ComparisonRow]:
    """
    Run several algorithms on the same workload, best average waiting first.

    FCFS and SJF always run their non-preemptive form here so each row
    matches its label; use SRT for the preemptive SJF.
    """
    cfg = coerce_config(config)
    rows: List[ComparisonRow] = []
    for alg in algorithms:
        tag = resolve_algorithm(alg)
        tag_cfg = replace(cfg, is_preemptive=None) if tag in _NON_PREEMPTIVE_IN_COMPARISON else cfg
        result = run(tag, processes, tag_cfg)
        rows.append(
            ComparisonRow(
                algorithm=tag,
                name=ALGORITHM_NAMES[tag],
                result=result,
                system=compute_system_metrics(result),
            )
        )

    rows.sort(key=lambda r: r.result.average_waiting_time)
    return rows


COMPARISON_METRICS: Mapping[str, str] = MappingProxyType(
    {
        "waiting": "Avg waiting",
        "turnaround": "Avg turnaround",
        "response": "Avg response",
        "cpu_utilization": "CPU utilization",
        "throughput": "Throughput",
    }
)


def best_by_metric(rows: List[ComparisonRow]) -> Dict[str, ComparisonRow]:
    """
    Winner per metric: lowest average waiting/turnaround/response time,
    highest CPU utilization and throughput. The first row wins ties.
    """
    if not rows:
        return {}

    return {
        "waiting": min(rows, key=lambda r: r.result.average_waiting_time),
        "turnaround": min(rows, key=lambda r: r.result.average_turnaround_time),
        "response": min(rows, key=lambda r: r.result.average_response_time),
        "cpu_utilization": max(rows, key=lambda r: r.system.cpu_utilization),
        "throughput": max(rows, key=lambda r: r.system.throughput),
    }
