import json
from datetime import datetime
from pathlib import Path

import pytest

from schedviz.export import export_result, result_to_csv, result_to_dict
from schedviz.metrics import compute_system_metrics
from schedviz.models import Process
from schedviz.scheduler import run


def _procs():
    return [
        Process("P1", arrival_time=0, burst_time=5, priority=2),
        Process("P2", arrival_time=1, burst_time=3),
        Process("P3", arrival_time=2, burst_time=8),
        Process("P4", arrival_time=3, burst_time=6),
    ]


def test_csv_header_block_and_table():
    text = result_to_csv(run("FCFS", _procs()), "First Come First Serve")
    lines = text.splitlines()
    assert lines[0] == "Algorithm: First Come First Serve"
    assert "Average Waiting Time: 5.75" in lines
    assert "CPU Utilization: 100.00%" in lines
    blank = lines.index("")
    assert lines[blank + 1].startswith("Process ID,Arrival Time,Burst Time,Priority")
    assert lines[blank + 2] == "P1,0,5,2,0,5,0,5"
    assert lines[blank + 3] == "P2,1,3,,4,7,4,8"


def test_csv_timestamp_is_optional():
    stamp = datetime(2024, 1, 2, 3, 4, 5)
    text = result_to_csv(run("FCFS", _procs()), "FCFS", timestamp=stamp)
    assert "Timestamp: 2024-01-02T03:04:05" in text


def test_json_export(tmp_path: Path):
    path = export_result(run("FB", _procs()), "FB", tmp_path / "out.json")
    data = json.loads(path.read_text())
    assert data["algorithm"] == "FB"
    assert data["metrics"]["totalTime"] == 22
    assert data["ganttChart"][0] == {"processId": "P1", "startTime": 0, "endTime": 1, "isIdle": False, "queueLevel": 0}
    assert [p["id"] for p in data["processes"]] == ["P1", "P2", "P3", "P4"]


def test_dict_marks_idle_items():
    data = result_to_dict(run("SJF", [Process("A", arrival_time=3, burst_time=1)]), "SJF")
    assert data["ganttChart"][0]["isIdle"] is True
    assert data["metrics"]["cpuUtilization"] == 25.0


def test_unsupported_export_suffix(tmp_path: Path):
    with pytest.raises(ValueError):
        export_result(run("FCFS", _procs()), "FCFS", tmp_path / "out.xml")


def test_system_metrics_with_idle_time():
    procs = [Process("X", arrival_time=2, burst_time=3), Process("Y", arrival_time=10, burst_time=2)]
    system = compute_system_metrics(run("FCFS", procs))
    assert system.idle_time == 7
    assert system.cpu_busy_time == 5
    assert system.makespan == 12
    assert system.cpu_utilization == pytest.approx(5 / 12)
    assert system.throughput == pytest.approx(2 / 12)
