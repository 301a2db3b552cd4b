"""Banker's algorithm for deadlock avoidance."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["UnsafeStateError", "compute_need", "safe_sequence", "is_safe"]


class UnsafeStateError(Exception):
    """Raised when no safe sequence exists for the given state."""


def compute_need(
    maximum: Sequence[Sequence[int]], allocation: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the need matrix, ``maximum - allocation`` element by element."""
    if len(maximum) != len(allocation):
        raise ValueError("maximum and allocation have different process counts")
    return [
        [most - held for most, held in zip(max_row, alloc_row, strict=True)]
        for max_row, alloc_row in zip(maximum, allocation)
    ]


def safe_sequence(
    maximum: Sequence[Sequence[int]],
    allocation: Sequence[Sequence[int]],
    available: Sequence[int],
) -> list[int]:
    """Return a safe order of process indices, or raise UnsafeStateError."""
    need = compute_need(maximum, allocation)
    if any(len(row) != len(available) for row in need):
        raise ValueError("resource count does not match available vector")
    work = list(available)
    finished = [False] * len(need)
    sequence: list[int] = []
    while len(sequence) < len(need):
        progressed = False
        for index, (need_row, alloc_row) in enumerate(zip(need, allocation)):
            if finished[index] or any(n > w for n, w in zip(need_row, work)):
                continue
            work = [w + held for w, held in zip(work, alloc_row)]
            finished[index] = True
            sequence.append(index)
            progressed = True
        if not progressed:
            raise UnsafeStateError("system is not in a safe state")
    return sequence


def is_safe(
    maximum: Sequence[Sequence[int]],
    allocation: Sequence[Sequence[int]],
    available: Sequence[int],
) -> bool:
    """Return whether the state has a safe sequence."""
    try:
        safe_sequence(maximum, allocation, available)
    except UnsafeStateError:
        return False
    return True