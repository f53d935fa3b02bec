from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Mapping

from .errors import WorkloadError
from .models import Process

CSV_FIELDS = ["pid", "arrival_time", "burst_time", "priority"]


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            return processes_from_json(f.read())
    if suffix == ".csv":
        return _load_csv(path)

    raise WorkloadError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def save_workload(processes: List[Process], path: str | Path) -> Path:
    """
    Write the input fields of ``processes`` to a JSON or CSV file.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        path.write_text(processes_to_json(processes), encoding="utf-8")
    elif suffix == ".csv":
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
            writer.writeheader()
            for p in processes:
                writer.writerow(
                    {
                        "pid": p.pid,
                        "arrival_time": p.arrival_time,
                        "burst_time": p.burst_time,
                        "priority": "" if p.priority is None else p.priority,
                    }
                )
    else:
        raise WorkloadError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    return path


def processes_from_json(text: str) -> List[Process]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise WorkloadError(f"Invalid JSON workload: {exc}") from exc

    if not isinstance(raw, list):
        raise WorkloadError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def processes_to_json(processes: List[Process]) -> str:
    return json.dumps([process_to_dict(p) for p in processes], indent=2)


def process_to_dict(process: Process) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": process.pid,
        "arrivalTime": process.arrival_time,
        "burstTime": process.burst_time,
    }
    if process.priority is not None:
        data["priority"] = process.priority
    return data


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            processes.append(_process_from_mapping(row))
    return processes


def _first(mapping: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in mapping:
            return mapping[key]
    raise KeyError(keys[0])


def _process_from_mapping(mapping) -> Process:
    try:
        pid = str(_first(mapping, "id", "pid"))
        arrival_time = int(_first(mapping, "arrivalTime", "arrival_time"))
        burst_time = int(_first(mapping, "burstTime", "burst_time"))
    except (KeyError, TypeError, ValueError) as exc:
        raise WorkloadError(f"Invalid process entry: {mapping!r}") from exc

    priority_val = mapping.get("priority")
    try:
        priority = int(priority_val) if priority_val not in (None, "") else None
    except (TypeError, ValueError) as exc:
        raise WorkloadError(f"Invalid priority in process entry: {mapping!r}") from exc

    return Process(
        pid=pid,
        arrival_time=arrival_time,
        burst_time=burst_time,
        priority=priority,
    )


def validate_processes(processes: List[Process]) -> List[Process]:
    """
    Caller-side checks the engine relies on. Returns the list unchanged.
    """
    if not processes:
        raise WorkloadError("At least one process is required")

    seen = set()
    for p in processes:
        if not p.pid.strip():
            raise WorkloadError("Process ID cannot be empty")
        if p.pid in seen:
            raise WorkloadError(f"Duplicate process ID: {p.pid}")
        if p.burst_time < 1:
            raise WorkloadError(f"Process {p.pid}: burst time must be at least 1")
        if p.arrival_time < 0:
            raise WorkloadError(f"Process {p.pid}: arrival time cannot be negative")
        seen.add(p.pid)

    return processes


def sample_processes() -> List[Process]:
    return [
        Process("P1", arrival_time=0, burst_time=5, priority=2),
        Process("P2", arrival_time=1, burst_time=3, priority=1),
        Process("P3", arrival_time=2, burst_time=8, priority=3),
        Process("P4", arrival_time=3, burst_time=6, priority=1),
        Process("P5", arrival_time=4, burst_time=2, priority=2),
    ]
