"""CPU scheduling algorithms: FCFS, SJF, priority, round robin and SRTF."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace

__all__ = [
    "Process",
    "fcfs",
    "sjf",
    "priority_schedule",
    "round_robin",
    "srtf",
    "average_times",
    "format_table",
]


@dataclass
class Process:
    """A process with its inputs and, once scheduled, its timing results.

    A lower ``priority`` value means a more urgent process.
    """

    pid: int
    arrival: int
    burst: int
    priority: int = 0
    completion: int = 0
    turnaround: int = 0
    waiting: int = 0


def _finish(process: Process, completion: int) -> Process:
    turnaround = completion - process.arrival
    return replace(
        process,
        completion=completion,
        turnaround=turnaround,
        waiting=turnaround - process.burst,
    )


def _checked(processes: Iterable[Process], *, positive: bool = False) -> list[Process]:
    items = list(processes)
    for process in items:
        if process.burst < 0 or (positive and process.burst == 0):
            raise ValueError(f"process {process.pid} has invalid burst time {process.burst}")
    return items


def fcfs(processes: Iterable[Process]) -> list[Process]:
    """First come, first served. Results are ordered by arrival."""
    results = []
    clock: int | None = None
    for process in sorted(_checked(processes), key=lambda p: p.arrival):
        start = process.arrival if clock is None else max(clock, process.arrival)
        clock = start + process.burst
        results.append(_finish(process, clock))
    return results


def _non_preemptive(
    processes: list[Process], key: Callable[[Process], int]
) -> list[Process]:
    pending = list(processes)
    ready: list[Process] = []
    results: list[Process] = []
    clock = 0
    while pending or ready:
        ready.extend(p for p in pending if p.arrival <= clock)
        pending = [p for p in pending if p.arrival > clock]
        if not ready:
            clock = min(p.arrival for p in pending)
            continue
        job = min(ready, key=key)
        ready.remove(job)
        clock += job.burst
        results.append(_finish(job, clock))
    return results


def sjf(processes: Iterable[Process]) -> list[Process]:
    """Non-preemptive shortest job first. Results are in completion order."""
    ordered = sorted(_checked(processes), key=lambda p: p.arrival)
    return _non_preemptive(ordered, key=lambda p: p.burst)


def priority_schedule(processes: Iterable[Process]) -> list[Process]:
    """Non-preemptive priority scheduling. Results are in completion order."""
    return _non_preemptive(_checked(processes), key=lambda p: p.priority)


def round_robin(processes: Iterable[Process], quantum: int) -> list[Process]:
    """Round robin with the given time quantum. Results are ordered by arrival."""
    if quantum <= 0:
        raise ValueError("time quantum must be positive")
    ordered = sorted(_checked(processes, positive=True), key=lambda p: p.arrival)
    remaining = [p.burst for p in ordered]
    results = list(ordered)
    queued: set[int] = set()
    queue: deque[int] = deque()
    clock = 0
    completed = 0

    def admit() -> None:
        for index, process in enumerate(ordered):
            if index not in queued and process.arrival <= clock and remaining[index] > 0:
                queue.append(index)
                queued.add(index)

    while completed < len(ordered):
        admit()
        if not queue:
            clock = min(p.arrival for i, p in enumerate(ordered) if i not in queued)
            continue
        index = queue.popleft()
        run = min(quantum, remaining[index])
        clock += run
        remaining[index] -= run
        admit()
        if remaining[index] == 0:
            results[index] = _finish(ordered[index], clock)
            completed += 1
        else:
            queue.append(index)
    return results


def srtf(processes: Iterable[Process]) -> list[Process]:
    """Preemptive shortest remaining time first. Results keep input order."""
    items = _checked(processes, positive=True)
    remaining = [p.burst for p in items]
    results = list(items)
    clock = 0
    completed = 0
    while completed < len(items):
        candidates = [
            i for i, p in enumerate(items) if p.arrival <= clock and remaining[i] > 0
        ]
        if candidates:
            index = min(candidates, key=remaining.__getitem__)
            remaining[index] -= 1
            if remaining[index] == 0:
                completed += 1
                results[index] = _finish(items[index], clock + 1)
        clock += 1
    return results


def average_times(processes: Iterable[Process]) -> tuple[float, float]:
    """Return ``(average turnaround, average waiting)`` of scheduled processes."""
    items = list(processes)
    if not items:
        raise ValueError("no processes to average")
    count = len(items)
    return (
        sum(p.turnaround for p in items) / count,
        sum(p.waiting for p in items) / count,
    )


def format_table(processes: Iterable[Process]) -> str:
    """Render scheduled processes as a tab separated table."""
    lines = ["PID\tAT\tBT\tCT\tTAT\tWT"]
    lines.extend(
        f"P{p.pid}\t{p.arrival}\t{p.burst}\t{p.completion}\t{p.turnaround}\t{p.waiting}"
        for p in processes
    )
    return "\n".join(lines)