# schedsim

Small simulations of classic operating-system CPU scheduling algorithms
and synchronisation problems, for coursework and experimentation. Each
scheduler is a plain function that returns data; a `schedsim` command
prints the schedules as tables.

## Installation

```
pip install .
```

## Library

### Batch scheduling: `schedsim.batch`

- `fcfs(bursts)`: first come, first served, in the order given.
- `sjf(bursts)`: shortest burst first, without preemption.
- `priority_schedule(jobs)`: `(burst, priority)` pairs, a lower number
  runs first.
- `multilevel_fcfs(processes)`: takes one sequence of `NamedProcess(pid,
  name, burst)` per queue level and schedules each level on its own with
  FCFS, every level starting at time 0. Returns one result per level.

Process numbers start at 1 in input order. Each function returns a
`ScheduleResult` with `processes` (a tuple of `ProcessResult` records
holding `pid`, `burst`, `waiting`, `turnaround`, `arrival`, `priority`
and `name`) in the order they ran, plus `average_waiting` and
`average_turnaround`.

For `fcfs`, `sjf` and `priority_schedule` the averages leave the first
process's figures out of the sums while still dividing by the full
count, so the average turnaround omits the first burst.
`multilevel_fcfs` averages over every process in the level. Jobs with
equal keys in `sjf` and `priority_schedule` are ordered by an exchange
sort, which is not stable. An empty input raises `ValueError`.

### Preemptive scheduling: `schedsim.preemptive`

- `priority_preemptive(jobs)`: `(arrival, burst, priority)` triples, one
  time unit at a time; the lowest priority number among arrived jobs
  runs, ties going to the earlier job.
- `round_robin(jobs, quantum)`: `(arrival, burst)` pairs visited in index
  order with the given time quantum.
- `srtf(jobs)`: `(arrival, burst)` pairs, shortest remaining time first.

These return a `ScheduleResult` in input order, averaged over all
processes. Empty input, a non-positive burst or a non-positive quantum
raises `ValueError`.

### Real-time scheduling: `schedsim.realtime`

- `Task(task_id, deadline, execution_time, remaining_time=None)`: a
  periodic task; `deadline` serves as the deadline for EDF and as the
  period for rate-monotonic scheduling.
- `edf(tasks, total_time)` and `rate_monotonic(tasks, total_time)`: return
  a list with the id of the task run at each tick, or `None` when idle.
  The given tasks are not modified.
- `format_timeline(timeline)`: renders one `Time t: Executing Task n` or
  `Time t: Idle` line per tick.
- `DEFAULT_TASKS` and `DEFAULT_SIMULATION_TIME` hold the sample task set
  and its 15-tick run.

### Synchronisation: `schedsim.sync`

- `BoundedBuffer(size=5, on_put=None, on_get=None)`: a circular buffer
  guarded by two semaphores and a lock; `put(item)` blocks while full,
  `get()` blocks while empty. It has `capacity` and `len()`.
- `producer_consumer(count=10, buffer_size=5, delay=1.0, emit=print)`:
  one producer and one consumer thread pass the items `0 .. count-1`
  through a bounded buffer; returns the items in consumed order.
- `dine_one_at_a_time(total, hungry, eat_time=1.0, emit=print)`: between
  2 and 5 philosophers, `hungry` being positions counted from 1; each
  hungry philosopher eats in its own thread holding a global lock and
  both chopsticks, one after another. Returns the eating order.

`emit` receives each line of progress output; pass `print` or a list's
`append`.

```python
from schedsim.batch import fcfs
from schedsim.preemptive import round_robin

result = fcfs([24, 3, 3])
print([p.waiting for p in result.processes])          # [0, 24, 27]
rr = round_robin([(0, 5), (1, 3), (2, 1)], quantum=2)
print(rr.average_waiting)
```

## Command line

`schedsim` takes a subcommand and its data as arguments:

```
schedsim fcfs 24 3 3
schedsim sjf 6 8 7 3
schedsim priority 10:3 1:1 2:4
schedsim priority-preemptive 0:5:2 1:3:1 2:1:3
schedsim rr 0:5 1:3 2:1 --quantum 2
schedsim srtf 0:8 1:4 2:9
schedsim multilevel --system init:4 daemon:3 --user editor:5 shell:2
schedsim edf --time 15
schedsim rms --time 15
schedsim producer-consumer --count 10 --buffer-size 5 --delay 0
schedsim philosophers --total 5 --hungry 1 3 --eat-time 0
```

`edf` and `rms` always run the sample task set. Invalid input ends the
command with a usage error.

## What it does not do

The command does not prompt for input interactively, and the real-time
commands cannot be given a task set of your own; use the library
functions for that.

## Running the tests

```
pip install ".[test]"
pytest
```