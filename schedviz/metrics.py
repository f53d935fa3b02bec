from __future__ import annotations

from typing import Dict, List, Optional

from .models import GanttItem, Process, SchedulingResult, SystemMetrics


def finalize_process(process: Process, completion_time: int) -> None:
    """
    Fill completion, turnaround and waiting time once a process finishes.
    """
    process.remaining_time = 0
    process.completion_time = completion_time
    process.turnaround_time = completion_time - process.arrival_time
    process.waiting_time = process.turnaround_time - process.burst_time


def summarize_process_metrics(processes: List[Process]) -> Dict[str, float]:
    """
    Return averages of the key per-process metrics for quick comparison.

    An empty list yields zeros rather than dividing by zero.
    """
    if not processes:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0, "avg_response": 0.0}

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time or 0 for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time or 0 for p in processes) / n,
        "avg_response": sum(p.response_time or 0 for p in processes) / n,
    }


def build_result(
    processes: List[Process],
    gantt_chart: List[GanttItem],
    queue_levels: Optional[Dict[int, List[List[str]]]] = None,
) -> SchedulingResult:
    summary = summarize_process_metrics(processes)
    total_time = gantt_chart[-1].end_time if gantt_chart else 0
    return SchedulingResult(
        processes=processes,
        gantt_chart=gantt_chart,
        average_waiting_time=summary["avg_waiting"],
        average_turnaround_time=summary["avg_turnaround"],
        average_response_time=summary["avg_response"],
        total_time=total_time,
        queue_levels=queue_levels,
    )


def compute_system_metrics(result: SchedulingResult) -> SystemMetrics:
    """
    Compute throughput and CPU utilization from a result's timeline.
    """
    makespan = result.total_time
    idle_time = sum(item.duration for item in result.gantt_chart if item.is_idle)
    cpu_busy_time = makespan - idle_time

    if makespan <= 0:
        return SystemMetrics(cpu_busy_time=0, idle_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)

    return SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        idle_time=idle_time,
        makespan=makespan,
        throughput=len(result.processes) / makespan,
        cpu_utilization=cpu_busy_time / makespan,
    )
