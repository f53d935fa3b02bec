import io
import threading

from rich.console import Console

from schedviz.animation import generate_animation
from schedviz.dashboard import build_comparison_table, play_animation, print_comparison, print_result
from schedviz.gantt import build_rich_gantt, render_gantt
from schedviz.models import Process
from schedviz.scheduler import compare_algorithms, run
from schedviz.workload_io import sample_processes


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def _idle_procs():
    return [Process("X", arrival_time=2, burst_time=3), Process("Y", arrival_time=10, burst_time=2)]


def test_plain_gantt_shows_idle_gaps():
    text = render_gantt(run("FCFS", _idle_procs()).gantt_chart)
    lines = text.splitlines()
    assert lines[0] == "Gantt Chart:"
    assert lines[1] == "|..===.....==|"
    assert lines[2].startswith("  X")


def test_plain_gantt_empty():
    assert render_gantt([]) == "(no execution)"


def test_rich_gantt_time_marks():
    panel, marks = build_rich_gantt(run("FCFS", sample_processes()).gantt_chart)
    assert panel.title == "Gantt Chart"
    assert marks.startswith("0    5  8      16")
    assert len(marks) == 1 + 24


def test_time_marks_end_on_interval_boundaries():
    chart = run("FCFS", _idle_procs()).gantt_chart

    _, marks = build_rich_gantt(chart)
    for item in chart:
        assert marks[item.end_time] == str(item.end_time)[-1]

    plain_marks = render_gantt(chart).splitlines()[3]
    assert plain_marks == marks


def test_print_result_renders_tables():
    console = _console()
    print_result(run("RR", sample_processes()), "Round Robin", console=console)
    out = console.file.getvalue()
    assert "Algorithm: Round Robin" in out
    assert "Per-process metrics" in out
    assert "System metrics" in out
    assert "100.0%" in out


def test_comparison_table_rows():
    rows = compare_algorithms(sample_processes(), ["FCFS", "SJF"])
    table = build_comparison_table(rows)
    assert table.row_count == 2
    console = _console()
    console.print(table)
    assert "Shortest Job First" in console.file.getvalue()


def test_play_animation_shows_every_snapshot():
    anim = generate_animation("FB", sample_processes())
    console = _console()
    shown = play_animation(anim, console=console, delay=0)
    assert shown == len(anim.snapshots)
    out = console.file.getvalue()
    assert "Simulating FB" in out
    assert "Q0" in out


def test_play_animation_can_be_cancelled():
    anim = generate_animation("FCFS", _idle_procs())
    stop = threading.Event()
    stop.set()
    assert play_animation(anim, console=_console(), delay=10, stop=stop) == 0


def test_comparison_prints_winners_below_table():
    procs = [Process("X", arrival_time=0, burst_time=8), Process("Y", arrival_time=1, burst_time=1)]
    console = _console()
    print_comparison(compare_algorithms(procs, ["FCFS", "SRT"]), console=console)
    out = console.file.getvalue()
    assert out.index("Algorithm comparison") < out.index("Best per metric")
    assert "Avg response" in out.split("Best per metric")[1]
    assert "Shortest Remaining Time" in out.split("Best per metric")[1]


def test_feedback_playback_keeps_queue_rows_while_idle():
    anim = generate_animation("FB", [Process("A", arrival_time=0, burst_time=2), Process("B", arrival_time=5, burst_time=1)])
    console = _console()
    play_animation(anim, console=console, delay=0)
    idle_section = console.file.getvalue().split("t = 2")[1].split("t = 5")[0]
    assert "Q2" in idle_section
