"""
Test cases for the goal report service: cache hits keyed on the goal snapshot, fallback-rate resolution and invalidation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import timedelta

import pytest

from conftest import DAY0, TODAY
from engine.enums import WeeklyPlan
from engine.goals import create_goal, record_checkpoint
from services import projection_service
from services.projection_service import forget_goal, goal_report, resolve_fallback_rate


def _goal(goal_id="g1"):
    goal = create_goal("cut", 200.0, 150.0, goal_id=goal_id, start_date=DAY0, target_date=TODAY + timedelta(days=100))
    goal = record_checkpoint(goal, 198.0, DAY0 + timedelta(days=4))
    return record_checkpoint(goal, 196.0, DAY0 + timedelta(days=8))


def test_resolve_fallback_rate():
    assert resolve_fallback_rate(-0.7, WeeklyPlan.gain1) == -0.7
    assert resolve_fallback_rate(0.0, None) == 0.0
    assert resolve_fallback_rate(0.0, WeeklyPlan.lose1) == pytest.approx(-1.0)
    assert resolve_fallback_rate(0.0, WeeklyPlan.gain05) == pytest.approx(0.5)


@pytest.mark.asyncio
async def test_second_request_is_served_from_cache(monkeypatch):
    calls = []
    real = projection_service.build_report

    def counting(*args, **kwargs):
        calls.append(args)
        return real(*args, **kwargs)

    monkeypatch.setattr(projection_service, "build_report", counting)

    first = await goal_report(_goal(), today=TODAY)
    second = await goal_report(_goal(), today=TODAY)
    assert first.cached is False
    assert second.cached is True
    assert len(calls) == 1
    assert second.projection.days_remaining == first.projection.days_remaining == 92
    assert second.weekly_rate == pytest.approx(-3.5)


@pytest.mark.asyncio
async def test_new_checkpoint_misses_cache():
    goal = _goal()
    await goal_report(goal, today=TODAY)
    updated = record_checkpoint(goal, 195.0, DAY0 + timedelta(days=10))
    fresh = await goal_report(updated, today=TODAY)
    assert fresh.cached is False
    assert fresh.projection.current_value == 195.0


@pytest.mark.asyncio
async def test_forget_goal_drops_cached_reports():
    await goal_report(_goal("g1"), today=TODAY)
    await goal_report(_goal("g2"), today=TODAY)
    assert await forget_goal("g1") == 1
    assert (await goal_report(_goal("g1"), today=TODAY)).cached is False
    assert (await goal_report(_goal("g2"), today=TODAY)).cached is True
