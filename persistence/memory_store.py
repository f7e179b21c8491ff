from __future__ import annotations

import logging
import threading
from typing import TypeVar

from .class_state import ClassRecord
from .interfaces import KeyValueStore

logger = logging.getLogger(__name__)

V = TypeVar("V")


class InMemoryKeyValueStore(KeyValueStore[V]):
    """
    Dict-backed store living for the lifetime of the process.

    Performs no locking of its own.
    """

    def __init__(self) -> None:
        self._data: dict[str, V] = {}

    def load(self, key: str) -> V | None:
        return self._data.get(key)

    def store(self, key: str, value: V) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data


_SHARED_CLASS_STORE: InMemoryKeyValueStore[ClassRecord] | None = None
_SHARED_CLASS_STORE_GUARD = threading.Lock()


def shared_class_store() -> InMemoryKeyValueStore[ClassRecord]:
    """
    Process-wide class store, built on first use.

    The None check happens under the guard so concurrent first callers all
    observe the same instance.
    """
    global _SHARED_CLASS_STORE
    with _SHARED_CLASS_STORE_GUARD:
        if _SHARED_CLASS_STORE is None:
            logger.info("CLASS STORE: creating shared in-memory store")
            _SHARED_CLASS_STORE = InMemoryKeyValueStore()
        return _SHARED_CLASS_STORE
