"""Page replacement algorithms that count page faults: FIFO, LRU and optimal."""

from __future__ import annotations

import math
from collections import OrderedDict, deque
from collections.abc import Iterable, Sequence

__all__ = ["fifo_faults", "lru_faults", "optimal_faults"]


def _check_capacity(capacity: int) -> None:
    if capacity <= 0:
        raise ValueError("frame capacity must be positive")


def fifo_faults(pages: Iterable[int], capacity: int) -> int:
    """Count faults when the oldest resident page is evicted first."""
    _check_capacity(capacity)
    frames: deque[int] = deque()
    resident: set[int] = set()
    faults = 0
    for page in pages:
        if page in resident:
            continue
        faults += 1
        if len(frames) == capacity:
            resident.discard(frames.popleft())
        frames.append(page)
        resident.add(page)
    return faults


def lru_faults(pages: Iterable[int], capacity: int) -> int:
    """Count faults when the least recently used page is evicted."""
    _check_capacity(capacity)
    frames: OrderedDict[int, None] = OrderedDict()
    faults = 0
    for page in pages:
        if page in frames:
            frames.move_to_end(page)
            continue
        faults += 1
        if len(frames) == capacity:
            frames.popitem(last=False)
        frames[page] = None
    return faults


def _next_use(pages: Sequence[int], start: int, page: int) -> float:
    for position in range(start, len(pages)):
        if pages[position] == page:
            return position
    return math.inf


def optimal_faults(pages: Iterable[int], capacity: int) -> int:
    """Count faults when the page used furthest in the future is evicted."""
    _check_capacity(capacity)
    sequence = list(pages)
    resident: set[int] = set()
    faults = 0
    for position, page in enumerate(sequence):
        if page in resident:
            continue
        faults += 1
        if len(resident) == capacity:
            victim = max(resident, key=lambda p: _next_use(sequence, position + 1, p))
            resident.remove(victim)
        resident.add(page)
    return faults