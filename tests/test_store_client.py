"""
Test Suite for Store Client

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio
import time

import pytest

from config import settings
from store import client as store_client
from store.client import get_redis as connect
from store.client import _fallback, redis_delete, redis_get, redis_scan, redis_set


class FakeRedis:
    def __init__(self):
        self.data = {}
        self.ttls = {}

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = value

    async def setex(self, key, ttl, value):
        self.data[key] = value
        self.ttls[key] = ttl

    async def delete(self, key):
        self.data.pop(key, None)

    async def scan_iter(self, pattern):
        import fnmatch

        for key in list(self.data):
            if fnmatch.fnmatch(key, pattern):
                yield key


class BrokenRedis:
    async def get(self, key):
        raise ConnectionError("down")

    async def set(self, key, value):
        raise ConnectionError("down")

    async def setex(self, key, ttl, value):
        raise ConnectionError("down")


@pytest.mark.asyncio
async def test_fallback_operations():
    await redis_set("k1", "v1")
    assert await redis_get("k1") == "v1"
    await redis_delete("k1")
    assert await redis_get("k1") is None


@pytest.mark.asyncio
async def test_keys_pattern():
    await redis_set("abc", "1")
    await redis_set("abx", "2")
    await redis_set("zzz", "3")
    keys = await redis_scan("ab*")
    assert sorted(keys) == ["abc", "abx"]


@pytest.mark.asyncio
async def test_fallback_is_bounded(monkeypatch):
    monkeypatch.setattr(settings, "store_fallback_max_items", 2)
    await redis_set("a", "1")
    await redis_set("b", "2")
    await redis_set("c", "3")
    assert await redis_get("c") is None
    assert len(_fallback) == 2


@pytest.mark.asyncio
async def test_live_client_with_ttl(monkeypatch):
    fake = FakeRedis()

    async def live():
        return fake

    monkeypatch.setattr(store_client, "get_redis", live)
    await redis_set("pp:x", "payload", ttl=60)
    assert fake.ttls["pp:x"] == 60
    assert await redis_get("pp:x") == "payload"
    assert await redis_scan("pp:*") == ["pp:x"]
    await redis_delete("pp:x")
    assert fake.data == {}
    assert _fallback == {}


@pytest.mark.asyncio
async def test_client_errors_fall_back_to_memory(monkeypatch):
    async def broken():
        return BrokenRedis()

    monkeypatch.setattr(store_client, "get_redis", broken)
    await redis_set("k", "v", ttl=30)
    assert _fallback["k"] == "v"
    assert await redis_get("k") == "v"


@pytest.mark.asyncio
async def test_waiting_callers_respect_cooldown_set_by_lock_holder(monkeypatch):
    import redis.asyncio as aioredis

    attempts = []
    monkeypatch.setattr(aioredis, "from_url", lambda *a, **kw: attempts.append(a))
    monkeypatch.setattr(store_client, "_redis_client", None)
    monkeypatch.setattr(store_client, "_using_fallback", False)
    monkeypatch.setattr(store_client, "_retry_after_monotonic", 0.0)

    await store_client._init_lock.acquire()
    try:
        waiter = asyncio.create_task(connect())
        await asyncio.sleep(0)
        store_client._retry_after_monotonic = time.monotonic() + 60
    finally:
        store_client._init_lock.release()

    assert await waiter is None
    assert attempts == []
    assert store_client.is_using_fallback() is True
