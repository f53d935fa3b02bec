from __future__ import annotations

import csv
import io
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from .metrics import compute_system_metrics
from .models import SchedulingResult

RESULT_COLUMNS = [
    "Process ID",
    "Arrival Time",
    "Burst Time",
    "Priority",
    "Waiting Time",
    "Turnaround Time",
    "Response Time",
    "Completion Time",
]


def result_to_csv(result: SchedulingResult, algorithm: str, timestamp: Optional[datetime] = None) -> str:
    """
    Metrics header block, a blank line, then one row per process.
    """
    system = compute_system_metrics(result)
    buf = io.StringIO()

    header = [f"Algorithm: {algorithm}"]
    if timestamp is not None:
        header.append(f"Timestamp: {timestamp.isoformat()}")
    header += [
        f"Average Waiting Time: {result.average_waiting_time:.2f}",
        f"Average Turnaround Time: {result.average_turnaround_time:.2f}",
        f"Average Response Time: {result.average_response_time:.2f}",
        f"CPU Utilization: {system.cpu_utilization * 100:.2f}%",
        f"Throughput: {system.throughput:.2f}",
        "",
    ]
    buf.write("\n".join(header) + "\n")

    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(RESULT_COLUMNS)
    for p in result.processes:
        writer.writerow(
            [
                p.pid,
                p.arrival_time,
                p.burst_time,
                "" if p.priority is None else p.priority,
                p.waiting_time,
                p.turnaround_time,
                p.response_time,
                p.completion_time,
            ]
        )

    return buf.getvalue()


def result_to_dict(result: SchedulingResult, algorithm: str) -> Dict[str, Any]:
    system = compute_system_metrics(result)
    return {
        "algorithm": algorithm,
        "metrics": {
            "averageWaitingTime": result.average_waiting_time,
            "averageTurnaroundTime": result.average_turnaround_time,
            "averageResponseTime": result.average_response_time,
            "cpuUtilization": system.cpu_utilization * 100,
            "throughput": system.throughput,
            "totalTime": result.total_time,
        },
        "processes": [
            {
                "id": p.pid,
                "arrivalTime": p.arrival_time,
                "burstTime": p.burst_time,
                "priority": p.priority,
                "startTime": p.start_time,
                "responseTime": p.response_time,
                "completionTime": p.completion_time,
                "turnaroundTime": p.turnaround_time,
                "waitingTime": p.waiting_time,
            }
            for p in result.processes
        ],
        "ganttChart": [
            {
                "processId": item.pid,
                "startTime": item.start_time,
                "endTime": item.end_time,
                "isIdle": item.is_idle,
                **({"queueLevel": item.queue_level} if item.queue_level is not None else {}),
            }
            for item in result.gantt_chart
        ],
    }


def result_to_json(result: SchedulingResult, algorithm: str) -> str:
    return json.dumps(result_to_dict(result, algorithm), indent=2)


def export_result(result: SchedulingResult, algorithm: str, path: str | Path) -> Path:
    """
    Write a result to ``.csv`` or ``.json`` depending on the file suffix.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        path.write_text(result_to_csv(result, algorithm), encoding="utf-8")
    elif suffix == ".json":
        path.write_text(result_to_json(result, algorithm), encoding="utf-8")
    else:
        raise ValueError(f"Unsupported export format: {suffix} (use .json or .csv)")

    return path
