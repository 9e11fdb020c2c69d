"""
Goal report service that runs the projection engine over a goal snapshot and caches the result under a content hash of that snapshot.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from api.responses import GoalReportResponse
from engine.enums import WeeklyPlan
from engine.models import Goal
from engine.rate import plan_rate
from engine.report import build_report
from store import keys, reports

log = logging.getLogger(__name__)


def resolve_fallback_rate(fallback_rate: float, weekly_plan: Optional[WeeklyPlan]) -> float:
    # an explicit fallback wins over one derived from the weekly plan
    if fallback_rate or weekly_plan is None:
        return fallback_rate
    return plan_rate(weekly_plan)


async def goal_report(
    goal: Goal,
    fallback_rate: float = 0.0,
    today: date | None = None,
) -> GoalReportResponse:
    if today is None:
        today = date.today()
    digest = keys.fingerprint(
        goal.checkpoints,
        goal.target_value,
        goal.target_date,
        fallback_rate,
        today,
        start_value=goal.start_value,
        current_value=goal.current_value,
    )

    cached = await reports.load(goal.id, digest)
    if cached is not None:
        log.debug("goal_report cache hit goal=%s", goal.id)
        return cached.model_copy(update={"cached": True})

    log.debug("goal_report cache miss goal=%s checkpoints=%d", goal.id, len(goal.checkpoints))
    response = GoalReportResponse.from_report(build_report(goal, fallback_rate, today))
    await reports.save(goal.id, digest, response)
    return response


async def forget_goal(goal_id: str) -> int:
    removed = await reports.invalidate(goal_id)
    log.info("Dropped %d cached report(s) for goal %s", removed, goal_id)
    return removed
