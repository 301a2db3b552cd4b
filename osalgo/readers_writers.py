"""Readers-writers lock giving readers priority, and a small simulation."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager

__all__ = ["ReadWriteLock", "simulate"]


class ReadWriteLock:
    """Many readers or one writer at a time; waiting readers go before writers."""

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._resource = threading.Semaphore(1)
        self._readers = 0
        self._writing = False

    @property
    def readers(self) -> int:
        """Number of readers currently inside."""
        return self._readers

    def acquire_read(self) -> int:
        """Enter as a reader and return the number of readers now inside."""
        with self._mutex:
            self._readers += 1
            if self._readers == 1:
                self._resource.acquire()
            return self._readers

    def release_read(self) -> int:
        """Leave as a reader and return the number inside just before leaving."""
        with self._mutex:
            if self._readers == 0:
                raise RuntimeError("release_read called with no reader inside")
            count = self._readers
            self._readers -= 1
            if self._readers == 0:
                self._resource.release()
            return count

    def acquire_write(self) -> None:
        """Enter as the only writer."""
        self._resource.acquire()
        self._writing = True

    def release_write(self) -> None:
        """Leave as the writer."""
        if not self._writing:
            raise RuntimeError("release_write called with no writer inside")
        self._writing = False
        self._resource.release()

    @contextmanager
    def reading(self) -> Iterator[int]:
        """Hold the lock as a reader, yielding the number of readers inside."""
        count = self.acquire_read()
        try:
            yield count
        finally:
            self.release_read()

    @contextmanager
    def writing(self) -> Iterator[None]:
        """Hold the lock as the writer."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


def simulate(count: int, log: Callable[[str], object] = print) -> None:
    """Run ``count`` reader and ``count`` writer threads, logging what they do."""
    if count < 0:
        raise ValueError("count must not be negative")
    lock = ReadWriteLock()
    log_lock = threading.Lock()

    def say(message: str) -> None:
        with log_lock:
            log(message)

    def reader() -> None:
        inside = lock.acquire_read()
        say(f"{inside} reader is inside")
        time.sleep(3e-6)
        leaving = lock.release_read()
        say(f"{leaving} reader is leaving")

    def writer() -> None:
        say("Writer is trying to enter")
        lock.acquire_write()
        say("Writer has entered")
        time.sleep(3e-6)
        lock.release_write()
        say("Writer is leaving")

    threads = []
    for _ in range(count):
        for target in (reader, writer):
            thread = threading.Thread(target=target)
            thread.start()
            threads.append(thread)
    for thread in threads:
        thread.join()