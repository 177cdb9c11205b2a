"""Non-preemptive batch scheduling: FCFS, shortest job first, priority and multilevel FCFS."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import Callable, Iterable, Sequence, TypeVar

_T = TypeVar("_T")


@dataclass(frozen=True)
class ProcessResult:
    """Timing figures of one process after scheduling."""

    pid: int
    burst: int
    waiting: int
    turnaround: int
    arrival: int = 0
    priority: int | None = None
    name: str | None = None


@dataclass(frozen=True)
class ScheduleResult:
    """Processes in the order they are reported, with the average figures."""

    processes: tuple[ProcessResult, ...]
    average_waiting: float
    average_turnaround: float


@dataclass(frozen=True)
class NamedProcess:
    """A process in a multilevel queue, identified by number and name."""

    pid: int
    name: str
    burst: int


def _exchange_sort(items: Iterable[_T], key: Callable[[_T], int]) -> list[_T]:
    """Order items by exchanging each position with any later smaller element.

    This sort is not stable; equal keys may change their relative order, and
    the schedulers depend on exactly that order.
    """
    ordered = list(items)
    for i in range(len(ordered) - 1):
        for j in range(i + 1, len(ordered)):
            if key(ordered[i]) > key(ordered[j]):
                ordered[i], ordered[j] = ordered[j], ordered[i]
    return ordered


def _run_back_to_back(
    order: Sequence[tuple[int, int, int | None, str | None]],
) -> list[ProcessResult]:
    starts = accumulate((burst for _, burst, _, _ in order), initial=0)
    return [
        ProcessResult(
            pid=pid,
            burst=burst,
            waiting=start,
            turnaround=start + burst,
            priority=priority,
            name=name,
        )
        for (pid, burst, priority, name), start in zip(order, starts)
    ]


def _tabulate(results: list[ProcessResult]) -> ScheduleResult:
    # The first job's figures are left out of the sums while the count still
    # includes it, so the average turnaround omits the first burst.
    count = len(results)
    return ScheduleResult(
        processes=tuple(results),
        average_waiting=sum(r.waiting for r in results[1:]) / count,
        average_turnaround=sum(r.turnaround for r in results[1:]) / count,
    )


def _require(items: list) -> None:
    if not items:
        raise ValueError("at least one process is required")


def fcfs(bursts: Iterable[int]) -> ScheduleResult:
    """Run processes in the order given; process numbers start at 1."""
    burst_list = [int(b) for b in bursts]
    _require(burst_list)
    order = [(pid, burst, None, None) for pid, burst in enumerate(burst_list, start=1)]
    return _tabulate(_run_back_to_back(order))


def sjf(bursts: Iterable[int]) -> ScheduleResult:
    """Run the shortest burst first, without preemption."""
    burst_list = [int(b) for b in bursts]
    _require(burst_list)
    jobs = list(enumerate(burst_list, start=1))
    ordered = _exchange_sort(jobs, key=lambda job: job[1])
    return _tabulate(_run_back_to_back([(pid, burst, None, None) for pid, burst in ordered]))


def priority_schedule(jobs: Iterable[tuple[int, int]]) -> ScheduleResult:
    """Run (burst, priority) jobs by priority, a lower number running first."""
    job_list = [(pid, int(burst), int(prio)) for pid, (burst, prio) in enumerate(jobs, start=1)]
    _require(job_list)
    ordered = _exchange_sort(job_list, key=lambda job: job[2])
    return _tabulate(
        _run_back_to_back([(pid, burst, prio, None) for pid, burst, prio in ordered])
    )


def multilevel_fcfs(processes: Iterable[Iterable[NamedProcess]]) -> list[ScheduleResult]:
    """Schedule each queue level separately with FCFS, highest level first.

    ``processes`` holds one sequence of NamedProcess per level; every level
    starts at time 0 and its averages include all of its processes.
    """
    results: list[ScheduleResult] = []
    for queue in processes:
        members = list(queue)
        _require(members)
        timed = _run_back_to_back([(p.pid, p.burst, None, p.name) for p in members])
        results.append(
            ScheduleResult(
                processes=tuple(timed),
                average_waiting=sum(r.waiting for r in timed) / len(timed),
                average_turnaround=sum(r.turnaround for r in timed) / len(timed),
            )
        )
    return results