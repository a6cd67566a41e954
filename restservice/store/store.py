"""
Key-Value Store Module

This module implements the in-memory storage behind the REST service.

The store is a plain dict guarded by a ReadWriteLock:
- get / get_all / size take the shared (read) lock
- put takes the exclusive (write) lock

Entries are only ever created or overwritten; nothing removes them.
"""

from typing import Dict, Optional

from .rwlock import ReadWriteLock


class KeyValueStore:
    """
    Thread-safe in-memory string -> string store.

    One instance is created at process start and shared by every request
    handler. Tests build their own instances, so several stores can live
    side by side.

    Internal Storage:
        Format: key -> value
        Guarded by self._lock (readers-writer discipline)
    """

    def __init__(self):
        """Initialize an empty store."""
        self._data: Dict[str, str] = {}
        self._lock = ReadWriteLock()

    def get(self, key: str) -> Optional[str]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            The value if present, None otherwise. Absence is a normal
            outcome, never an error.

        Concurrency: shared lock; runs alongside other readers and waits
        only behind an in-flight put.
        """
        with self._lock.read_locked():
            return self._data.get(key)

    def get_all(self) -> Dict[str, str]:
        """
        Take a snapshot of every entry.

        Returns:
            A new dict holding all entries at the moment of the call.
            The copy is made under the read lock, so writes that finish
            later are never reflected in it.
        """
        with self._lock.read_locked():
            return dict(self._data)

    def put(self, key: str, value: str) -> None:
        """
        Insert or overwrite a key-value pair.

        Args:
            key: The key to store (any string, including empty)
            value: The value to associate with the key (any string)

        Concurrency: exclusive lock; no reader or other writer runs
        while the mapping is updated.
        """
        with self._lock.write_locked():
            self._data[key] = value

    def size(self) -> int:
        """Get the current number of entries."""
        with self._lock.read_locked():
            return len(self._data)
