from __future__ import annotations

from typing import Protocol, TypeVar

V = TypeVar("V")


class KeyValueStore(Protocol[V]):
    """
    Minimal key-value interface: one value per string key.

    Implementations are not required to be thread-safe; callers hold the
    appropriate lock around every read-modify-write.
    """

    def load(self, key: str) -> V | None:
        """Return the value stored under key, or None when absent."""
        ...

    def store(self, key: str, value: V) -> None:
        """Insert or replace the value under key."""
        ...

    def delete(self, key: str) -> None:
        """Remove key if present."""
        ...
