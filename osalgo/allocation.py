"""Contiguous memory allocation: first, best, worst and next fit."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "Allocation",
    "first_fit",
    "best_fit",
    "worst_fit",
    "next_fit",
    "format_allocations",
]


@dataclass(frozen=True)
class Allocation:
    """Where one process was placed; ``block`` is None when it did not fit.

    ``process`` and ``block`` are zero-based indices; ``block_size`` is the
    free space of the block just before this process was placed.
    """

    process: int
    size: int
    block: int | None = None
    block_size: int | None = None

    @property
    def allocated(self) -> bool:
        return self.block is not None

    @property
    def remaining(self) -> int | None:
        if self.block_size is None:
            return None
        return self.block_size - self.size


Chooser = Callable[[list[int], int], "int | None"]


def _allocate(blocks: Sequence[int], processes: Iterable[int], choose: Chooser) -> list[Allocation]:
    free = list(blocks)
    results = []
    for index, size in enumerate(processes):
        block = choose(free, size)
        if block is None:
            results.append(Allocation(index, size))
            continue
        results.append(Allocation(index, size, block, free[block]))
        free[block] -= size
    return results


def _fitting(free: list[int], size: int) -> list[int]:
    return [j for j, space in enumerate(free) if space >= size]


def first_fit(blocks: Sequence[int], processes: Iterable[int]) -> list[Allocation]:
    """Place each process in the first block with enough free space."""
    return _allocate(blocks, processes, lambda free, size: next(iter(_fitting(free, size)), None))


def best_fit(blocks: Sequence[int], processes: Iterable[int]) -> list[Allocation]:
    """Place each process in the smallest block that still fits it."""

    def choose(free: list[int], size: int) -> int | None:
        return min(_fitting(free, size), key=free.__getitem__, default=None)

    return _allocate(blocks, processes, choose)


def worst_fit(blocks: Sequence[int], processes: Iterable[int]) -> list[Allocation]:
    """Place each process in the largest block that fits it."""

    def choose(free: list[int], size: int) -> int | None:
        return max(_fitting(free, size), key=free.__getitem__, default=None)

    return _allocate(blocks, processes, choose)


def next_fit(blocks: Sequence[int], processes: Iterable[int]) -> list[Allocation]:
    """Like first fit, but each search starts at the last block used."""
    last = 0

    def choose(free: list[int], size: int) -> int | None:
        nonlocal last
        count = len(free)
        for step in range(count):
            block = (last + step) % count
            if free[block] >= size:
                last = block
                return block
        return None

    return _allocate(blocks, processes, choose)


def format_allocations(allocations: Iterable[Allocation]) -> str:
    """Describe each allocation on its own line, numbering from one."""
    lines = []
    for item in allocations:
        if item.allocated:
            lines.append(
                f"Process {item.process + 1} allocated in block {item.block + 1} "
                f"(size: {item.block_size}, remaining: {item.remaining})"
            )
        else:
            lines.append(f"Process {item.process + 1} not allocated")
    return "\n".join(lines)