"""Command-line front end for the schedulers and synchronisation demos."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from schedsim.batch import NamedProcess, ScheduleResult, fcfs, multilevel_fcfs, priority_schedule, sjf
from schedsim.preemptive import priority_preemptive, round_robin, srtf
from schedsim.realtime import (
    DEFAULT_SIMULATION_TIME,
    DEFAULT_TASKS,
    edf,
    format_timeline,
    rate_monotonic,
)
from schedsim.sync import dine_one_at_a_time, producer_consumer


def _int_tuple(size: int, label: str) -> Callable[[str], tuple[int, ...]]:
    def parse(text: str) -> tuple[int, ...]:
        parts = text.split(":")
        if len(parts) != size:
            raise argparse.ArgumentTypeError(f"expected {label}, got {text!r}")
        try:
            return tuple(int(part) for part in parts)
        except ValueError:
            raise argparse.ArgumentTypeError(f"expected {label}, got {text!r}") from None

    return parse


def _named_burst(text: str) -> tuple[str, int]:
    name, sep, burst = text.rpartition(":")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME:BURST, got {text!r}")
    try:
        return name, int(burst)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected NAME:BURST, got {text!r}") from None


def _averages(result: ScheduleResult) -> str:
    return (
        f"\nAverage Waiting Time: {result.average_waiting:.2f}"
        f"\nAverage Turnaround Time: {result.average_turnaround:.2f}\n"
    )


def _burst_table(result: ScheduleResult) -> str:
    rows = "".join(
        f"{r.pid}\t\t{r.burst}\t\t{r.waiting}\t\t{r.turnaround}\n" for r in result.processes
    )
    return "\nPROCESS\tBURST TIME\tWAITING TIME\tTURNAROUND TIME\n" + rows + _averages(result)


def _priority_table(result: ScheduleResult) -> str:
    rows = "".join(
        f"P{r.pid}\t{r.burst}\t{r.priority}\t\t{r.waiting}\t{r.turnaround}\n"
        for r in result.processes
    )
    return "\nPROCESS\tBT\tPRIORITY\tWT\tTAT\n" + rows + _averages(result)


def _preemptive_priority_table(result: ScheduleResult) -> str:
    rows = "".join(
        f"P{r.pid}\t{r.arrival}\t{r.burst}\t{r.priority}\t\t{r.waiting}\t{r.turnaround}\n"
        for r in result.processes
    )
    return "\nPROCESS\tAT\tBT\tPRIORITY\tWT\tTAT\n" + rows + _averages(result)


def _arrival_table(result: ScheduleResult) -> str:
    rows = "".join(
        f"P{r.pid}\t{r.arrival}\t{r.burst}\t{r.waiting}\t{r.turnaround}\n"
        for r in result.processes
    )
    return "\nPROCESS\tAT\tBT\tWT\tTAT\n" + rows + _averages(result)


def _queue_report(result: ScheduleResult) -> str:
    rows = "".join(
        f"{r.pid}\t{r.name}\t{r.burst}\t\t{r.waiting}\t\t{r.turnaround}\n"
        for r in result.processes
    )
    return (
        "\nScheduling processes with FCFS...\n"
        "PID\tName\tBurst Time\tWaiting Time\tTurnaround Time\n"
        + rows
        + f"\nAverage Waiting Time: {result.average_waiting:.2f}\n"
        + f"Average Turnaround Time: {result.average_turnaround:.2f}\n"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim", description="Simulate CPU scheduling and synchronisation."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("fcfs", help="first come, first served")
    cmd.add_argument("bursts", nargs="+", type=int, metavar="BURST")

    cmd = commands.add_parser("sjf", help="shortest job first, non-preemptive")
    cmd.add_argument("bursts", nargs="+", type=int, metavar="BURST")

    cmd = commands.add_parser("priority", help="priority, non-preemptive")
    cmd.add_argument("jobs", nargs="+", type=_int_tuple(2, "BURST:PRIORITY"), metavar="BURST:PRIORITY")

    cmd = commands.add_parser("priority-preemptive", help="priority, preemptive")
    cmd.add_argument(
        "jobs",
        nargs="+",
        type=_int_tuple(3, "ARRIVAL:BURST:PRIORITY"),
        metavar="ARRIVAL:BURST:PRIORITY",
    )

    cmd = commands.add_parser("rr", help="round robin")
    cmd.add_argument("jobs", nargs="+", type=_int_tuple(2, "ARRIVAL:BURST"), metavar="ARRIVAL:BURST")
    cmd.add_argument("-q", "--quantum", type=int, required=True, help="time quantum")

    cmd = commands.add_parser("srtf", help="shortest remaining time first")
    cmd.add_argument("jobs", nargs="+", type=_int_tuple(2, "ARRIVAL:BURST"), metavar="ARRIVAL:BURST")

    cmd = commands.add_parser("multilevel", help="system and user queues, each FCFS")
    cmd.add_argument("--system", nargs="+", type=_named_burst, required=True, metavar="NAME:BURST")
    cmd.add_argument("--user", nargs="+", type=_named_burst, required=True, metavar="NAME:BURST")

    cmd = commands.add_parser("edf", help="earliest deadline first on the sample task set")
    cmd.add_argument("--time", type=int, default=DEFAULT_SIMULATION_TIME)

    cmd = commands.add_parser("rms", help="rate monotonic on the sample task set")
    cmd.add_argument("--time", type=int, default=DEFAULT_SIMULATION_TIME)

    cmd = commands.add_parser("producer-consumer", help="bounded buffer demo")
    cmd.add_argument("--count", type=int, default=10)
    cmd.add_argument("--buffer-size", type=int, default=5)
    cmd.add_argument("--delay", type=float, default=1.0)

    cmd = commands.add_parser("philosophers", help="dining philosophers, one eating at a time")
    cmd.add_argument("--total", type=int, required=True)
    cmd.add_argument("--hungry", type=int, nargs="+", required=True, metavar="POSITION")
    cmd.add_argument("--eat-time", type=float, default=1.0)
    return parser


def _run(args: argparse.Namespace) -> str | None:
    command = args.command
    if command == "fcfs":
        return _burst_table(fcfs(args.bursts))
    if command == "sjf":
        return _burst_table(sjf(args.bursts))
    if command == "priority":
        return _priority_table(priority_schedule(args.jobs))
    if command == "priority-preemptive":
        return _preemptive_priority_table(priority_preemptive(args.jobs))
    if command == "rr":
        return _arrival_table(round_robin(args.jobs, args.quantum))
    if command == "srtf":
        return _arrival_table(srtf(args.jobs))
    if command == "multilevel":
        levels = [
            [NamedProcess(pid, name, burst) for pid, (name, burst) in enumerate(queue, start=1)]
            for queue in (args.system, args.user)
        ]
        system, user = multilevel_fcfs(levels)
        return (
            "\nScheduling system processes:\n"
            + _queue_report(system)
            + "\nScheduling user processes:\n"
            + _queue_report(user)
        )
    if command in ("edf", "rms"):
        if args.time < 0:
            raise ValueError("simulation time must not be negative")
        simulate = edf if command == "edf" else rate_monotonic
        return format_timeline(simulate(DEFAULT_TASKS, args.time))
    if command == "producer-consumer":
        producer_consumer(args.count, args.buffer_size, args.delay, print)
        return None
    dine_one_at_a_time(args.total, args.hungry, args.eat_time, print)
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen simulation, printing its report."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        report = _run(args)
    except ValueError as exc:
        parser.error(str(exc))
    if report is not None:
        print(report, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())