# osalgo

A small collection of classic operating-system algorithms. Each one is a
plain Python function that takes ordinary lists and numbers and returns its
results, so they are easy to explore in a REPL or build into exercises.

## What is inside

| Module | Topic | Names |
| --- | --- | --- |
| `osalgo.scheduling` | CPU scheduling | `Process`, `fcfs`, `sjf`, `priority_schedule`, `round_robin`, `srtf`, `average_times`, `format_table` |
| `osalgo.banker` | Deadlock avoidance | `compute_need`, `safe_sequence`, `is_safe`, `UnsafeStateError` |
| `osalgo.allocation` | Contiguous memory allocation | `Allocation`, `first_fit`, `best_fit`, `worst_fit`, `next_fit`, `format_allocations` |
| `osalgo.paging` | Page replacement | `fifo_faults`, `lru_faults`, `optimal_faults` |
| `osalgo.disk` | Disk scheduling | `Direction`, `fcfs_seek`, `sstf_order`, `sstf_seek`, `scan_seek` |
| `osalgo.readers_writers` | Synchronisation | `ReadWriteLock`, `simulate` |
| `osalgo.commands` | Copying files and searching them | `copy_file`, `grep_file`, `main` |
| `osalgo.redirection` | Summing two integers from a file into another | `sum_from_file`, `main` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## CPU scheduling

Build `Process` records with a `pid`, an `arrival` time, a `burst` time and,
for priority scheduling, a `priority` (a lower value is more urgent). Each
scheduler returns new records with `completion`, `turnaround` and `waiting`
filled in:

- `fcfs` and `round_robin(processes, quantum)` return results ordered by arrival;
- `sjf` and `priority_schedule` are non-preemptive and return results in
  completion order;
- `srtf` is preemptive shortest remaining time first and keeps the input order.

```python
from osalgo.scheduling import Process, round_robin, average_times, format_table

jobs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 1)]
done = round_robin(jobs, quantum=2)
print(format_table(done))
print(average_times(done))  # (average turnaround, average waiting)
```

A negative burst time, a zero burst time for `round_robin` and `srtf`, or a
quantum below one raises `ValueError`.

## Banker's algorithm

```python
from osalgo.banker import safe_sequence, UnsafeStateError

allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
try:
    print(safe_sequence(maximum, allocation, [3, 3, 2]))
except UnsafeStateError:
    print("System is not in a safe state")
```

`safe_sequence` returns zero-based process indices; `is_safe` returns a
boolean instead of raising, and `compute_need` gives `maximum - allocation`.

## Memory allocation

`first_fit`, `best_fit`, `worst_fit` and `next_fit` take block sizes and
process sizes and return one `Allocation` per process. Its `process` and
`block` are zero-based indices (`block` is `None` when the process did not
fit), `block_size` is the free space of the block just before placement, and
`allocated` and `remaining` are derived from them. `format_allocations`
renders the results as lines numbered from one.

## Page replacement

```python
from osalgo.paging import fifo_faults, lru_faults, optimal_faults

pages = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2]
print(fifo_faults(pages, 3), lru_faults(pages, 3), optimal_faults(pages, 3))
```

Each function returns the number of page faults; a capacity below one raises
`ValueError`.

## Disk scheduling

```python
from osalgo.disk import Direction, sstf_order, sstf_seek, scan_seek

requests = [98, 183, 37, 122, 14, 124, 65, 67]
print(sstf_order(requests, 53))
print(sstf_seek(requests, 53))
print(scan_seek(requests, 53, Direction.LEFT, 200))
```

`fcfs_seek`, `sstf_seek` and `scan_seek` return total head movement. SCAN
travels to the edge of the disk in the chosen direction (cylinder 0 or
`disk_size - 1`) before turning back; cylinders outside the disk raise
`ValueError`.

## Readers and writers

`ReadWriteLock` admits many readers or one writer, with readers given
priority. Use `acquire_read`/`release_read` and
`acquire_write`/`release_write`, or the `reading()` and `writing()` context
managers; the `readers` property reports how many readers are inside.
`simulate(count, log=print)` starts `count` reader and `count` writer threads
and passes each message they produce to `log`.

## Command-line tools

```
osalgo-commands
```

starts an interactive menu that copies a file or prints the lines of a file
matching a pattern. The same actions can be run directly:

```
osalgo-commands cp SOURCE DESTINATION
osalgo-commands grep PATTERN FILE
```

```
osalgo-redirect [INPUT] [OUTPUT]
```

reads the first two integers of `INPUT` (default `input.txt`) and writes
`Sum = N` to `OUTPUT` (default `output.txt`).

## What it does not do

`osalgo-commands` copies and searches within Python itself (`shutil` and
regular expressions); it does not start the system `cp` or `grep`, and its
output is not coloured. `osalgo-redirect` works on files directly rather than
passing data between separate processes through a pipe.