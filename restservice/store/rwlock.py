"""
Readers-Writer Lock Module

This module provides the concurrency primitive that guards the store.

Lock Concept:
- Any number of readers may hold the lock at the same time
- A writer holds the lock alone: no readers, no other writers
- Writers are preferred: once a writer is waiting, new readers queue
  behind it so a steady stream of reads cannot starve a write
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """
    Readers-writer lock built on a single threading.Condition.

    Usage:
        lock = ReadWriteLock()
        with lock.read_locked():
            ...  # shared access
        with lock.write_locked():
            ...  # exclusive access

    Attributes:
        readers: Number of threads currently holding the read lock
        writing: True while a writer holds the lock
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writing = False

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writing(self) -> bool:
        return self._writing

    def acquire_read(self) -> None:
        """Block until shared access is granted."""
        with self._cond:
            while self._writing or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        """Give up shared access."""
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release_read() called without a read lock held")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        """Block until exclusive access is granted."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            except BaseException:
                # Readers queued behind this writer must not stay parked
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writing = True

    def release_write(self) -> None:
        """Give up exclusive access."""
        with self._cond:
            if not self._writing:
                raise RuntimeError("release_write() called without the write lock held")
            self._writing = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
