from schedviz.animation import build_animation, build_events, generate_animation
from schedviz.models import Process
from schedviz.scheduler import run


def _procs():
    return [
        Process("P1", arrival_time=0, burst_time=5),
        Process("P2", arrival_time=1, burst_time=3),
        Process("P3", arrival_time=2, burst_time=8),
        Process("P4", arrival_time=3, burst_time=6),
    ]


def _ids(processes):
    return [p.pid for p in processes]


def test_one_snapshot_per_gantt_item():
    anim = generate_animation("FCFS", _procs())
    assert anim.algorithm == "FCFS"
    assert anim.total_time == 22
    assert [s.time for s in anim.snapshots] == [0, 5, 8, 16]


def test_snapshot_classification():
    anim = generate_animation("fcfs", _procs())

    first = anim.snapshots[0]
    assert first.running.pid == "P1"
    assert first.ready == []
    assert _ids(first.waiting) == ["P2", "P3", "P4"]
    assert first.completed == []

    second = anim.snapshots[1]
    assert second.running.pid == "P2"
    assert _ids(second.ready) == ["P3", "P4"]
    assert _ids(second.completed) == ["P1"]
    assert second.waiting == []
    assert second.queues is None


def test_idle_snapshot_has_no_running_process():
    procs = [Process("X", arrival_time=2, burst_time=3), Process("Y", arrival_time=10, burst_time=2)]
    anim = generate_animation("RR", procs)
    idle = anim.snapshots[0]
    assert idle.time == 0
    assert idle.running is None
    assert _ids(idle.waiting) == ["X", "Y"]

    assert [s.time for s in anim.snapshots] == [0, 2, 4, 5, 10]
    gap = anim.snapshots[3]
    assert gap.running is None
    assert _ids(gap.completed) == ["X"]


def test_feedback_snapshots_carry_queue_levels():
    anim = generate_animation("FB", _procs())
    at_four = next(s for s in anim.snapshots if s.time == 4)
    assert at_four.running.pid == "P1"
    assert [_ids(level) for level in at_four.queues] == [[], ["P2", "P3", "P4"], []]
    assert all(s.queues is not None for s in anim.snapshots)


def test_animation_from_existing_result():
    result = run("SRT", _procs())
    anim = build_animation("SRT", result)
    assert len(anim.snapshots) == len(result.gantt_chart)
    assert anim.snapshots[2].running is result.processes[0]


def test_events_for_fcfs():
    events = build_events(run("FCFS", _procs()))
    assert [(e.time, e.action, e.pid) for e in events[:2]] == [(0, "arrive", "P1"), (0, "start", "P1")]
    assert [e.pid for e in events if e.action == "complete"] == ["P1", "P2", "P3", "P4"]
    assert not any(e.action == "preempt" for e in events)
    times = [e.time for e in events]
    assert times == sorted(times)


def test_events_for_round_robin_preemption():
    procs = [Process("A", arrival_time=0, burst_time=3), Process("B", arrival_time=0, burst_time=1)]
    events = build_events(run("RR", procs, {"timeQuantum": 2}))
    assert [(e.time, e.action, e.pid) for e in events] == [
        (0, "arrive", "A"),
        (0, "arrive", "B"),
        (0, "start", "A"),
        (2, "preempt", "A"),
        (2, "start", "B"),
        (3, "complete", "B"),
        (3, "start", "A"),
        (4, "complete", "A"),
    ]


def test_events_for_feedback_queue_moves():
    events = build_events(run("FB", [Process("A", arrival_time=0, burst_time=4)]))
    moves = [(e.time, e.from_queue, e.to_queue) for e in events if e.action == "queue_move"]
    assert moves == [(1, 0, 1), (3, 1, 2)]


def test_feedback_idle_snapshots_have_empty_levels():
    procs = [Process("A", arrival_time=0, burst_time=2), Process("B", arrival_time=5, burst_time=1)]
    anim = generate_animation("FB", procs)
    assert [s.time for s in anim.snapshots] == [0, 1, 2, 5]
    idle = anim.snapshots[2]
    assert idle.running is None
    assert idle.queues == [[], [], []]
    assert all(s.queues is not None and len(s.queues) == 3 for s in anim.snapshots)


def test_non_feedback_snapshots_have_no_levels():
    anim = generate_animation("RR", [Process("A", arrival_time=2, burst_time=1)])
    assert all(s.queues is None for s in anim.snapshots)
