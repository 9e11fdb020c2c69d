"""
Full report for one goal snapshot: windowed weekly rate, projection from the goal's true start value, milestones, deadline verdict and progress summary.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from engine.exceptions import InvalidInputError
from engine.models import Goal, Milestone, ProgressSummary, ProjectionResult, ScheduleVerdict
from engine.numeric import all_finite
from engine.progress import build_milestones, summarize
from engine.projection import invalid_projection, project
from engine.rate import estimate_weekly_rate
from engine.schedule import evaluate_schedule

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GoalReport:
    goal_id: str
    weekly_rate: float
    projection: ProjectionResult
    milestones: List[Milestone]
    schedule: ScheduleVerdict
    progress: Optional[ProgressSummary]


def build_report(goal: Goal, fallback_rate: float = 0.0, today: date | None = None) -> GoalReport:
    if today is None:
        today = date.today()

    # short window: the chartable projection follows the recent trend
    try:
        weekly_rate = estimate_weekly_rate(goal.checkpoints)
    except InvalidInputError:
        log.debug("build_report: goal %s has non-finite checkpoints", goal.id)
        weekly_rate = 0.0
        projection = invalid_projection(goal.current_value, goal.target_value, goal.start_value)
    else:
        projection = project(
            goal.current_value,
            goal.target_value,
            weekly_rate,
            fallback_rate,
            start_value=goal.start_value,
            today=today,
        )

    # full span: the deadline verdict follows the long-run trend
    schedule = evaluate_schedule(goal.checkpoints, goal.target_value, goal.target_date, today=today)

    numbers_ok = all_finite((goal.start_value, goal.current_value, goal.target_value))
    return GoalReport(
        goal_id=goal.id,
        weekly_rate=weekly_rate,
        projection=projection,
        milestones=build_milestones(projection, today),
        schedule=schedule,
        progress=summarize(goal, today) if numbers_ok else None,
    )
