import pytest

from schedsim.batch import fcfs, priority_schedule, sjf
from schedsim.preemptive import priority_preemptive, round_robin, srtf


def _check_consistent(result, jobs_bursts):
    assert [p.pid for p in result.processes] == list(range(1, len(jobs_bursts) + 1))
    for p, burst in zip(result.processes, jobs_bursts):
        assert p.burst == burst
        assert p.turnaround == p.waiting + p.burst
        assert p.waiting >= 0
    n = len(result.processes)
    assert result.average_waiting == sum(p.waiting for p in result.processes) / n
    assert result.average_turnaround == sum(p.turnaround for p in result.processes) / n


def _finish_times(result):
    return [p.arrival + p.turnaround for p in result.processes]


def test_round_robin_worked_example():
    result = round_robin([(0, 5), (1, 3), (2, 1)], 2)
    assert tuple(p.waiting for p in result.processes) == (4, 4, 2)
    _check_consistent(result, [5, 3, 1])


def test_round_robin_large_quantum_is_fcfs():
    bursts = [4, 9, 2, 6]
    rr = round_robin([(0, b) for b in bursts], 100)
    plain = fcfs(bursts)
    assert [p.waiting for p in rr.processes] == [p.waiting for p in plain.processes]
    assert [p.turnaround for p in rr.processes] == [p.turnaround for p in plain.processes]


def test_round_robin_all_work_done_without_idle():
    bursts = [3, 7, 5]
    result = round_robin([(0, b) for b in bursts], 2)
    assert max(_finish_times(result)) == sum(bursts)
    _check_consistent(result, bursts)


def test_round_robin_waits_for_late_arrival():
    result = round_robin([(4, 3)], 2)
    assert result.processes[0].turnaround >= result.processes[0].burst
    _check_consistent(result, [3])


@pytest.mark.parametrize("quantum", [0, -1])
def test_round_robin_rejects_bad_quantum(quantum):
    with pytest.raises(ValueError):
        round_robin([(0, 1)], quantum)


@pytest.mark.parametrize("func", [srtf, lambda jobs: round_robin(jobs, 2)])
def test_rejects_non_positive_burst(func):
    with pytest.raises(ValueError):
        func([(0, 3), (1, 0)])


@pytest.mark.parametrize("func", [srtf, lambda jobs: round_robin(jobs, 2), priority_preemptive])
def test_rejects_empty(func):
    with pytest.raises(ValueError):
        func([])


def test_srtf_all_at_zero_matches_sjf():
    bursts = [6, 8, 7, 3]
    pre = srtf([(0, b) for b in bursts])
    non = sjf(bursts)
    by_pid = {p.pid: p.waiting for p in non.processes}
    assert [p.waiting for p in pre.processes] == [by_pid[pid] for pid in range(1, 5)]
    _check_consistent(pre, bursts)


def test_srtf_preempts_for_shorter_job():
    result = srtf([(0, 8), (1, 1)])
    short = result.processes[1]
    assert short.turnaround == short.burst
    assert _finish_times(result)[0] == sum(p.burst for p in result.processes)


def test_srtf_idle_gap():
    result = srtf([(0, 2), (5, 3)])
    late = result.processes[1]
    assert late.turnaround == late.burst
    assert result.processes[0].turnaround == result.processes[0].burst
    _check_consistent(result, [2, 3])


def test_priority_preemptive_all_at_zero_matches_non_preemptive():
    jobs = [(10, 3), (1, 1), (2, 4), (1, 5), (5, 2)]
    pre = priority_preemptive([(0, b, p) for b, p in jobs])
    non = priority_schedule(jobs)
    by_pid = {p.pid: p for p in non.processes}
    for p in pre.processes:
        assert p.waiting == by_pid[p.pid].waiting
        assert p.turnaround == by_pid[p.pid].turnaround
        assert p.priority == by_pid[p.pid].priority


def test_priority_preemptive_preempts_running_job():
    result = priority_preemptive([(0, 4, 2), (1, 2, 1)])
    urgent = result.processes[1]
    assert urgent.waiting == result.processes[0].arrival
    assert urgent.turnaround == urgent.burst
    assert result.processes[0].turnaround == sum(p.burst for p in result.processes)
    _check_consistent(result, [4, 2])


def test_priority_preemptive_tie_goes_to_earlier_job():
    result = priority_preemptive([(0, 3, 1), (0, 3, 1)])
    first, second = result.processes
    assert first.turnaround == first.burst
    assert second.waiting == first.burst