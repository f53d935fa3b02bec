from __future__ import annotations

import threading
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .gantt import build_rich_gantt
from .metrics import compute_system_metrics
from .models import ComparisonRow, Process, QueueAnimation, QueueSnapshot, SchedulingResult
from .scheduler import COMPARISON_METRICS, best_by_metric


def _fmt(value: Optional[int]) -> str:
    return "-" if value is None else str(value)


def build_process_table(result: SchedulingResult) -> Table:
    headers = [
        "PID",
        "Arrive",
        "Burst",
        "Priority",
        "Start",
        "Complete",
        "Wait",
        "Turnaround",
        "Response",
    ]

    table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        justify = "center" if h in {"PID", "Priority"} else "right"
        table.add_column(h, justify=justify)

    for p in result.processes:
        table.add_row(
            p.pid,
            str(p.arrival_time),
            str(p.burst_time),
            "" if p.priority is None else str(p.priority),
            _fmt(p.start_time),
            _fmt(p.completion_time),
            _fmt(p.waiting_time),
            _fmt(p.turnaround_time),
            _fmt(p.response_time),
        )

    return table


def build_system_table(result: SchedulingResult) -> Table:
    system = compute_system_metrics(result)

    table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    table.add_row("Avg waiting", f"{result.average_waiting_time:.2f}")
    table.add_row("Avg turnaround", f"{result.average_turnaround_time:.2f}")
    table.add_row("Avg response", f"{result.average_response_time:.2f}")
    table.add_row("Total time", str(result.total_time))
    table.add_row("Idle time", str(system.idle_time))
    table.add_row("Throughput (proc/time)", f"{system.throughput:.3f}")
    table.add_row("CPU utilization", f"{system.cpu_utilization * 100:.1f}%")

    return table


def build_comparison_table(rows: List[ComparisonRow]) -> Table:
    table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    table.add_column("Rank", justify="right")
    table.add_column("Algorithm")
    table.add_column("Avg waiting", justify="right")
    table.add_column("Avg turnaround", justify="right")
    table.add_column("Avg response", justify="right")
    table.add_column("CPU util.", justify="right")
    table.add_column("Throughput", justify="right")

    for rank, row in enumerate(rows, start=1):
        table.add_row(
            str(rank),
            row.name,
            f"{row.result.average_waiting_time:.2f}",
            f"{row.result.average_turnaround_time:.2f}",
            f"{row.result.average_response_time:.2f}",
            f"{row.system.cpu_utilization * 100:.1f}%",
            f"{row.system.throughput:.3f}",
        )

    return table


def build_winners_table(rows: List[ComparisonRow]) -> Table:
    table = Table(title="Best per metric", box=box.SIMPLE_HEAVY)
    table.add_column("Metric")
    table.add_column("Algorithm")

    for metric, row in best_by_metric(rows).items():
        table.add_row(COMPARISON_METRICS[metric], row.name)

    return table


def print_comparison(rows: List[ComparisonRow], console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(build_comparison_table(rows))
    if rows:
        console.print(build_winners_table(rows))


def print_result(result: SchedulingResult, algorithm: str, console: Optional[Console] = None) -> None:
    console = console or Console()

    console.print(f"[bold]Algorithm:[/bold] {algorithm}")
    console.print()

    panel, time_marks = build_rich_gantt(result.gantt_chart)
    console.print(panel)
    if time_marks:
        console.print(time_marks)

    console.print()
    console.print(build_process_table(result))
    console.print()
    console.print(build_system_table(result))


def _pids(processes: List[Process]) -> str:
    return ", ".join(p.pid for p in processes) or "-"


def build_snapshot_table(snapshot: QueueSnapshot) -> Table:
    table = Table(title=f"t = {snapshot.time}", box=box.SIMPLE, show_header=False)
    table.add_column("Queue", style="bold")
    table.add_column("Processes")

    table.add_row("Running", snapshot.running.pid if snapshot.running else "[dim]idle[/dim]")
    table.add_row("Ready", _pids(snapshot.ready))
    if snapshot.queues is not None:
        for level, queue in enumerate(snapshot.queues):
            table.add_row(f"  Q{level}", _pids(queue))
    table.add_row("Not arrived", _pids(snapshot.waiting))
    table.add_row("Completed", _pids(snapshot.completed))

    return table


def play_animation(
    animation: QueueAnimation,
    console: Optional[Console] = None,
    delay: float = 0.5,
    stop: Optional[threading.Event] = None,
) -> int:
    """
    Step through precomputed snapshots, waiting ``delay`` seconds between
    them. Setting ``stop`` from another thread ends playback early.

    Returns the number of snapshots shown.
    """
    console = console or Console()
    stop = stop or threading.Event()

    console.print(f"[bold]Simulating {animation.algorithm}[/bold] (duration {animation.total_time} time units)")

    shown = 0
    for idx, snapshot in enumerate(animation.snapshots):
        if stop.is_set():
            break
        console.print(build_snapshot_table(snapshot))
        shown += 1
        if idx < len(animation.snapshots) - 1 and stop.wait(delay):
            break

    return shown
