import os
import sys
from datetime import date, datetime, timedelta, timezone

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.models import Checkpoint
from store.client import _fallback

TODAY = date(2026, 1, 5)
DAY0 = datetime(2026, 1, 1, 8, 0, tzinfo=timezone.utc)


def make_series(*points):
    """Build a checkpoint series from ``(day_offset, value)`` pairs relative to DAY0."""
    return [Checkpoint(timestamp=DAY0 + timedelta(days=d), value=v) for d, v in points]


@pytest.fixture
def today():
    return TODAY


@pytest.fixture(autouse=True)
def memory_store(monkeypatch):
    """Force the report cache onto the in-memory fallback and wipe it around
    each test so no test ever attempts a network connection.
    """
    import store.client as client

    async def no_redis():
        return None

    monkeypatch.setattr(client, "get_redis", no_redis)
    _fallback.clear()
    yield
    _fallback.clear()
