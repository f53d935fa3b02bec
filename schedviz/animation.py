"""
Replays a computed schedule as stepped queue snapshots for playback.

Nothing here schedules anything: snapshots and events are derived purely
from a ``SchedulingResult``.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .models import AnimationStep, Process, QueueAnimation, QueueSnapshot, SchedulingResult
from .scheduler import ConfigLike, resolve_algorithm, run

# Order of events that share a timestamp.
_ACTION_ORDER = {"complete": 0, "preempt": 1, "arrive": 2, "queue_move": 3, "start": 4}


def build_snapshot(result: SchedulingResult, time: int, running_pid: Optional[str]) -> QueueSnapshot:
    snapshot = QueueSnapshot(time=time)

    for p in result.processes:
        if p.arrival_time > time:
            snapshot.waiting.append(p)
        elif p.completion_time is not None and p.completion_time <= time:
            snapshot.completed.append(p)
        elif p.pid == running_pid:
            snapshot.running = p
        else:
            snapshot.ready.append(p)

    if result.queue_levels is not None:
        by_pid: Dict[str, Process] = {p.pid: p for p in result.processes}
        levels = result.queue_levels.get(time)
        if levels is None:
            # Idle CPU: every level is empty.
            any_levels = next(iter(result.queue_levels.values()), [])
            levels = [[] for _ in any_levels]
        snapshot.queues = [[by_pid[pid] for pid in level] for level in levels]

    return snapshot


def build_animation(algorithm: str, result: SchedulingResult) -> QueueAnimation:
    """
    One snapshot per Gantt interval, taken at the interval's start time.
    """
    snapshots = [
        build_snapshot(result, item.start_time, None if item.is_idle else item.pid)
        for item in result.gantt_chart
    ]
    return QueueAnimation(algorithm=algorithm, total_time=result.total_time, snapshots=snapshots)


def generate_animation(algorithm: str, processes: List[Process], config: ConfigLike = None) -> QueueAnimation:
    """
    Run the engine and turn its result into a ``QueueAnimation``.
    """
    tag = resolve_algorithm(algorithm)
    return build_animation(tag, run(tag, processes, config))


def build_events(result: SchedulingResult) -> List[AnimationStep]:
    """
    Chronological event log (arrivals, dispatches, preemptions, completions
    and feedback queue moves) for step-by-step narration.
    """
    events: List[AnimationStep] = []
    completion = {p.pid: p.completion_time for p in result.processes}

    for p in result.processes:
        events.append(
            AnimationStep(
                time=p.arrival_time,
                action="arrive",
                pid=p.pid,
                description=f"{p.pid} arrives",
                to_queue=0 if result.queue_levels is not None else None,
            )
        )

    items = [item for item in result.gantt_chart if not item.is_idle]
    for idx, item in enumerate(items):
        level = "" if item.queue_level is None else f" from Q{item.queue_level}"
        events.append(
            AnimationStep(
                time=item.start_time,
                action="start",
                pid=item.pid,
                description=f"{item.pid} starts running{level}",
                from_queue=item.queue_level,
            )
        )

        if completion.get(item.pid) == item.end_time:
            events.append(
                AnimationStep(time=item.end_time, action="complete", pid=item.pid, description=f"{item.pid} completes")
            )
            continue

        events.append(
            AnimationStep(time=item.end_time, action="preempt", pid=item.pid, description=f"{item.pid} is preempted")
        )

        following = next((later for later in items[idx + 1:] if later.pid == item.pid), None)
        if (
            following is not None
            and item.queue_level is not None
            and following.queue_level is not None
            and following.queue_level != item.queue_level
        ):
            events.append(
                AnimationStep(
                    time=item.end_time,
                    action="queue_move",
                    pid=item.pid,
                    description=f"{item.pid} moves from Q{item.queue_level} to Q{following.queue_level}",
                    from_queue=item.queue_level,
                    to_queue=following.queue_level,
                )
            )

    events.sort(key=lambda e: (e.time, _ACTION_ORDER[e.action]))
    return events
