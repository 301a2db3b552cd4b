"""Disk scheduling: FCFS, shortest seek time first and SCAN."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum
from itertools import pairwise

__all__ = ["Direction", "fcfs_seek", "sstf_order", "sstf_seek", "scan_seek"]


class Direction(IntEnum):
    """Direction in which the head first moves."""

    LEFT = 0
    RIGHT = 1


def _travel(head: int, stops: Iterable[int]) -> int:
    return sum(abs(b - a) for a, b in pairwise([head, *stops]))


def fcfs_seek(requests: Iterable[int], head: int) -> int:
    """Total head movement when requests are served in arrival order."""
    return _travel(head, requests)


def sstf_order(requests: Sequence[int], head: int) -> list[int]:
    """Order in which shortest seek time first serves the requests.

    Ties go to the request listed first.
    """
    pending = list(requests)
    order = []
    while pending:
        nearest = min(range(len(pending)), key=lambda i: abs(pending[i] - head))
        head = pending.pop(nearest)
        order.append(head)
    return order


def sstf_seek(requests: Sequence[int], head: int) -> int:
    """Total head movement under shortest seek time first."""
    return _travel(head, sstf_order(requests, head))


def scan_seek(
    requests: Iterable[int], head: int, direction: Direction | int, disk_size: int
) -> int:
    """Total head movement under SCAN.

    Requests below the head form the left side, the others the right side.
    The edge of the disk in ``direction`` (0 or ``disk_size - 1``) joins that
    side; that side is visited first, then the other, each in ascending order.
    """
    direction = Direction(direction)
    if disk_size <= 0:
        raise ValueError("disk size must be positive")
    pending = list(requests)
    for position in (head, *pending):
        if not 0 <= position < disk_size:
            raise ValueError(f"cylinder {position} is outside the disk")
    left = [r for r in pending if r < head]
    right = [r for r in pending if r >= head]
    if direction is Direction.LEFT:
        stops = sorted([*left, 0]) + sorted(right)
    else:
        stops = sorted([*right, disk_size - 1]) + sorted(left)
    return _travel(head, stops)