"""
Test Suite for the projection report cache

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import timedelta

import pytest

from api.responses import GoalReportResponse
from conftest import DAY0, TODAY
from engine.goals import create_goal, record_checkpoint
from engine.report import build_report
from store import keys, reports
from store.client import _fallback, redis_set


def _response(goal_id="g1"):
    goal = create_goal("cut", 200.0, 150.0, goal_id=goal_id, start_date=DAY0, target_date=TODAY + timedelta(days=100))
    goal = record_checkpoint(goal, 196.0, DAY0 + timedelta(days=8))
    return GoalReportResponse.from_report(build_report(goal, today=TODAY))


@pytest.mark.asyncio
async def test_save_then_load():
    resp = _response()
    await reports.save("g1", "d1", resp)
    loaded = await reports.load("g1", "d1")
    assert loaded is not None
    assert loaded.goal_id == "g1"
    assert loaded.projection.days_remaining == resp.projection.days_remaining
    assert loaded.schedule.status == resp.schedule.status


@pytest.mark.asyncio
async def test_load_miss():
    assert await reports.load("g1", "nope") is None


@pytest.mark.asyncio
async def test_load_ignores_corrupt_entry():
    await redis_set(keys.report("g1", "bad"), "{not json")
    assert await reports.load("g1", "bad") is None


@pytest.mark.asyncio
async def test_invalidate_only_touches_one_goal():
    await reports.save("g1", "d1", _response("g1"))
    await reports.save("g1", "d2", _response("g1"))
    await reports.save("g2", "d1", _response("g2"))
    assert await reports.invalidate("g1") == 2
    assert await reports.load("g1", "d1") is None
    assert await reports.load("g2", "d1") is not None
    assert len(_fallback) == 1
