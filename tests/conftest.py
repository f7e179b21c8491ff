from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


DATE_FORMAT = "%Y-%m-%d"


@pytest.fixture
def store():
    from persistence.memory_store import InMemoryKeyValueStore

    return InMemoryKeyValueStore()


@pytest.fixture
def service(store):
    from persistence.locks import GlobalLock
    from service.booking_service import BookingService

    return BookingService(store=store, locks=GlobalLock(), date_format=DATE_FORMAT)


@pytest.fixture
def settings():
    from settings import Settings

    return Settings(
        date_format=DATE_FORMAT,
        base_route="",
        host="127.0.0.1",
        port=8080,
        lock_granularity="global",
        log_level="INFO",
        debug_log_requests=True,
    )


@pytest.fixture
def client(settings, service):
    """
    App wired to a fresh store so tests never share classes.
    """
    from fastapi.testclient import TestClient

    import app as app_module

    with TestClient(app_module.create_app(settings=settings, service=service)) as c:
        yield c
