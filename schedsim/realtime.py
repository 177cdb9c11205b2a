"""Periodic real-time task simulation: earliest deadline first and rate monotonic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Task:
    """A periodic task.

    ``deadline`` is the relative deadline used by EDF and the period used by
    rate-monotonic scheduling. ``remaining_time`` defaults to the execution time.
    """

    task_id: int
    deadline: int
    execution_time: int
    remaining_time: int | None = None

    def __post_init__(self) -> None:
        if self.remaining_time is None:
            object.__setattr__(self, "remaining_time", self.execution_time)


DEFAULT_TASKS: tuple[Task, ...] = (
    Task(1, 3, 1, 1),
    Task(2, 5, 2, 2),
    Task(3, 7, 2, 2),
)
DEFAULT_SIMULATION_TIME = 15


def _simulate(tasks: Iterable[Task], total_time: int) -> list[int | None]:
    # A stable sort by the fixed key; re-sorting each tick would not change it.
    ordered = sorted(tasks, key=lambda task: task.deadline)
    remaining = [task.remaining_time for task in ordered]
    timeline: list[int | None] = []
    for _ in range(total_time):
        slot = next((i for i, left in enumerate(remaining) if left > 0), None)
        if slot is None:
            timeline.append(None)
            continue
        remaining[slot] -= 1
        if remaining[slot] == 0:
            remaining[slot] = ordered[slot].execution_time
        timeline.append(ordered[slot].task_id)
    return timeline


def edf(tasks: Iterable[Task], total_time: int) -> list[int | None]:
    """Simulate EDF for ``total_time`` ticks.

    Returns the id of the task run at each tick, or None when idle. The given
    tasks are not modified.
    """
    return _simulate(tasks, total_time)


def rate_monotonic(tasks: Iterable[Task], total_time: int) -> list[int | None]:
    """Simulate rate-monotonic scheduling, the shortest period first."""
    return _simulate(tasks, total_time)


def format_timeline(timeline: Sequence[int | None]) -> str:
    """Render a timeline one line per tick."""
    return "".join(
        f"Time {t}: Idle\n" if task_id is None else f"Time {t}: Executing Task {task_id}\n"
        for t, task_id in enumerate(timeline)
    )