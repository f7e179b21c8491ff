from __future__ import annotations

from .class_state import ClassRecord
from .interfaces import KeyValueStore
from .locks import GlobalLock, KeyLockRegistry, LockProvider, lock_provider_for
from .memory_store import InMemoryKeyValueStore, shared_class_store

__all__ = [
    "ClassRecord",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "shared_class_store",
    "LockProvider",
    "GlobalLock",
    "KeyLockRegistry",
    "lock_provider_for",
]
