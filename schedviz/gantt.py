from __future__ import annotations

from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import GanttItem

PALETTE = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def render_gantt(items: List[GanttItem]) -> str:
    """
    Plain-text Gantt chart: ``=`` for CPU time, ``.`` for idle time.
    """
    if not items:
        return "(no execution)"

    line = "|"
    labels = ""
    time_marks = str(items[0].start_time)

    for item in items:
        width = max(1, item.duration)
        if item.is_idle:
            line += "." * width
            labels += " " * width
        else:
            line += "=" * width
            labels += item.pid[:width].ljust(width)
        time_marks += f"{item.end_time:>{width}}"

    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            labels,
            time_marks,
        ]
    )


def build_rich_gantt(items: List[GanttItem], title: str = "Gantt Chart") -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not items:
        panel = Panel("No execution", title=title)
        return panel, ""

    pid_to_color: Dict[str, str] = {}

    def pid_color(pid: str) -> str:
        if pid not in pid_to_color:
            idx = len(pid_to_color) % len(PALETTE)
            pid_to_color[pid] = PALETTE[idx]
        return pid_to_color[pid]

    timeline = Text()
    labels = Text()
    time_marks = str(items[0].start_time)

    for item in items:
        width = max(1, item.duration)

        if item.is_idle:
            timeline.append("." * width, style="dim")
            labels.append(" " * width)
        else:
            timeline.append(" " * width, style=f"on {pid_color(item.pid)}")
            labels.append(item.pid[:width].ljust(width), style="bold")

        time_marks += f"{item.end_time:>{width}}"

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title=title)
    return panel, time_marks
