"""Schedulers with arrival times: preemptive priority, round robin and SRTF."""

from __future__ import annotations

from itertools import cycle
from typing import Iterable

from schedsim.batch import ProcessResult, ScheduleResult


def _require(bursts: list[int]) -> None:
    if not bursts:
        raise ValueError("at least one process is required")
    if any(b <= 0 for b in bursts):
        raise ValueError("burst times must be positive")


def _summarise(results: list[ProcessResult]) -> ScheduleResult:
    count = len(results)
    return ScheduleResult(
        processes=tuple(results),
        average_waiting=sum(r.waiting for r in results) / count,
        average_turnaround=sum(r.turnaround for r in results) / count,
    )


def _tick_scheduler(
    arrivals: list[int], bursts: list[int], rank
) -> dict[int, int]:
    """Run one time unit at a time, choosing among ready processes by ``rank``.

    ``rank(index, remaining)`` gives the sort key; ties go to the lower index.
    Returns the finishing time of each process index.
    """
    remaining = list(bursts)
    finished: dict[int, int] = {}
    time = 0
    while len(finished) < len(bursts):
        ready = [i for i, arrival in enumerate(arrivals) if arrival <= time and remaining[i] > 0]
        if not ready:
            time = min(a for i, a in enumerate(arrivals) if remaining[i] > 0)
            continue
        current = min(ready, key=lambda i: (rank(i, remaining), i))
        remaining[current] -= 1
        time += 1
        if remaining[current] == 0:
            finished[current] = time
    return finished


def priority_preemptive(jobs: Iterable[tuple[int, int, int]]) -> ScheduleResult:
    """Preemptive priority scheduling of (arrival, burst, priority) jobs.

    A lower priority number wins; equal priorities go to the earlier job.
    """
    job_list = [(int(a), int(b), int(p)) for a, b, p in jobs]
    arrivals = [a for a, _, _ in job_list]
    bursts = [b for _, b, _ in job_list]
    priorities = [p for _, _, p in job_list]
    _require(bursts)
    finished = _tick_scheduler(arrivals, bursts, lambda i, _remaining: priorities[i])
    results = []
    for i, (arrival, burst, prio) in enumerate(job_list):
        turnaround = finished[i] - arrival
        results.append(
            ProcessResult(
                pid=i + 1,
                burst=burst,
                waiting=turnaround - burst,
                turnaround=turnaround,
                arrival=arrival,
                priority=prio,
            )
        )
    return _summarise(results)


def round_robin(jobs: Iterable[tuple[int, int]], quantum: int) -> ScheduleResult:
    """Round robin over (arrival, burst) jobs, visiting them in index order.

    When no arrived job has work left after a visit, the clock advances by one.
    """
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    job_list = [(int(a), int(b)) for a, b in jobs]
    arrivals = [a for a, _ in job_list]
    bursts = [b for _, b in job_list]
    _require(bursts)

    remaining = list(bursts)
    finished: dict[int, int] = {}
    time = 0
    for i in cycle(range(len(job_list))):
        if len(finished) == len(job_list):
            break
        if remaining[i] > 0 and arrivals[i] <= time:
            run = min(remaining[i], quantum)
            time += run
            remaining[i] -= run
            if remaining[i] == 0:
                finished[i] = time
        if not any(a <= time and r > 0 for a, r in zip(arrivals, remaining)):
            time += 1

    results = []
    for i, (arrival, burst) in enumerate(job_list):
        turnaround = finished[i] - arrival
        results.append(
            ProcessResult(
                pid=i + 1,
                burst=burst,
                waiting=turnaround - burst,
                turnaround=turnaround,
                arrival=arrival,
            )
        )
    return _summarise(results)


def srtf(jobs: Iterable[tuple[int, int]]) -> ScheduleResult:
    """Shortest remaining time first over (arrival, burst) jobs."""
    job_list = [(int(a), int(b)) for a, b in jobs]
    arrivals = [a for a, _ in job_list]
    bursts = [b for _, b in job_list]
    _require(bursts)
    finished = _tick_scheduler(arrivals, bursts, lambda i, remaining: remaining[i])
    results = []
    for i, (arrival, burst) in enumerate(job_list):
        waiting = max(finished[i] - burst - arrival, 0)
        results.append(
            ProcessResult(
                pid=i + 1,
                burst=burst,
                waiting=waiting,
                turnaround=waiting + burst,
                arrival=arrival,
            )
        )
    return _summarise(results)