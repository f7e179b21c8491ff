from __future__ import annotations

import threading
from datetime import date

from persistence.class_state import ClassRecord
from persistence.locks import GlobalLock, KeyLockRegistry, lock_provider_for
from persistence.memory_store import InMemoryKeyValueStore, shared_class_store

import pytest


def _record(capacity: int = 2) -> ClassRecord:
    return ClassRecord(allowed_capacity=capacity, start_date=date(2025, 6, 1), end_date=date(2025, 6, 10))


def test_in_memory_store_load_store_delete():
    store: InMemoryKeyValueStore[ClassRecord] = InMemoryKeyValueStore()
    assert store.load("Yoga") is None

    rec = _record()
    store.store("Yoga", rec)
    assert store.load("Yoga") is rec
    assert "Yoga" in store
    assert len(store) == 1

    # overwrite, no merge
    replacement = _record(capacity=9)
    store.store("Yoga", replacement)
    assert store.load("Yoga").allowed_capacity == 9

    store.delete("Yoga")
    assert store.load("Yoga") is None
    # deleting a missing key is a no-op
    store.delete("Yoga")
    assert len(store) == 0


def test_shared_class_store_is_created_once_across_threads():
    seen = []
    barrier = threading.Barrier(8)

    def grab():
        barrier.wait()
        seen.append(shared_class_store())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(seen) == 8
    assert all(s is seen[0] for s in seen)
    assert shared_class_store() is seen[0]


def test_global_lock_is_shared_by_every_key():
    locks = GlobalLock()
    assert locks.lock_for("Yoga") is locks.lock_for("Pilates")


def test_key_lock_registry_excludes_per_key_and_drops_released_entries():
    locks = KeyLockRegistry()
    holding = threading.Event()
    release = threading.Event()
    order: list[str] = []

    def hold_yoga():
        with locks.lock_for("Yoga"):
            holding.set()
            release.wait(timeout=5)
            order.append("first-yoga-done")

    def second_yoga():
        with locks.lock_for("Yoga"):
            order.append("second-yoga")

    holder = threading.Thread(target=hold_yoga)
    holder.start()
    assert holding.wait(timeout=5)

    # Another class is not blocked by Yoga's lock.
    with locks.lock_for("Pilates"):
        order.append("pilates")

    waiter = threading.Thread(target=second_yoga)
    waiter.start()
    waiter.join(timeout=0.2)
    assert waiter.is_alive()

    release.set()
    holder.join(timeout=5)
    waiter.join(timeout=5)

    assert order == ["pilates", "first-yoga-done", "second-yoga"]
    assert len(locks) == 0


def test_lock_provider_for_rejects_unknown_granularity():
    assert isinstance(lock_provider_for("global"), GlobalLock)
    assert isinstance(lock_provider_for("per_class"), KeyLockRegistry)
    with pytest.raises(ValueError):
        lock_provider_for("per_user")


def test_class_record_bookings_per_day():
    rec = _record(capacity=2)
    day = date(2025, 6, 5)
    assert rec.covers(date(2025, 6, 1))
    assert rec.covers(date(2025, 6, 10))
    assert not rec.covers(date(2025, 5, 31))
    assert not rec.covers(date(2025, 6, 11))

    rec.add_booking(day, "john")
    rec.add_booking(day, "jane")
    assert rec.bookings_on(day) == ["john", "jane"]
    assert rec.is_full_on(day)
    assert not rec.is_full_on(date(2025, 6, 6))
    assert rec.bookings_on(date(2025, 6, 6)) == []


def test_class_record_rejects_non_positive_capacity():
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        ClassRecord(allowed_capacity=0, start_date=date(2025, 6, 1), end_date=date(2025, 6, 1))
