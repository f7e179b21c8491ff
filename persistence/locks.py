from __future__ import annotations

import contextlib
import threading
from typing import ContextManager, Iterator, Protocol

GLOBAL = "global"
PER_CLASS = "per_class"


class LockProvider(Protocol):
    def lock_for(self, key: str) -> ContextManager[object]:
        ...


class GlobalLock(LockProvider):
    """
    Hands out one lock for every key, so all classes serialize against each other.
    """

    def __init__(self, lock: threading.Lock | None = None) -> None:
        self._lock = lock if lock is not None else threading.Lock()

    def lock_for(self, key: str) -> ContextManager[object]:
        return self._lock


class _KeyLock:
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.holders = 0


class KeyLockRegistry(LockProvider):
    """
    Provides a lock per class name, created on demand.

    An entry lives only while some caller holds or waits on it, so the registry
    never outgrows the number of in-flight requests.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, _KeyLock] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextlib.contextmanager
    def lock_for(self, key: str) -> Iterator[None]:
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = _KeyLock()
                self._locks[key] = entry
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._locks[key]


def lock_provider_for(granularity: str) -> LockProvider:
    if granularity == GLOBAL:
        return GlobalLock()
    if granularity == PER_CLASS:
        return KeyLockRegistry()
    raise ValueError(f"Unknown lock granularity: {granularity!r}")
