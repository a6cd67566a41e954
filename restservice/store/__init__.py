"""Store module for restservice."""

from .rwlock import ReadWriteLock
from .store import KeyValueStore

__all__ = ["KeyValueStore", "ReadWriteLock"]
