"""
Milestone generation along the start-to-target journey of a projection, dating each milestone from the projected weekly rate.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from datetime import date
from typing import List, Optional, Sequence, Tuple

from config import DAYS_PER_WEEK, settings
from engine.enums import ProjectionStatus
from engine.models import Milestone, ProjectionResult
from engine.numeric import round_half_up
from engine.series import shift_date


def _milestone_date(value: float, projection: ProjectionResult, today: date) -> Optional[date]:
    if projection.weekly_rate == 0:
        return None
    days = (value - projection.current_value) / projection.weekly_rate * DAYS_PER_WEEK
    if not math.isfinite(days):
        return None
    days = round_half_up(days)
    return shift_date(today, days) if days > 0 else None


def build_milestones(
    projection: ProjectionResult,
    today: date | None = None,
    marks: Sequence[Tuple[float, str]] | None = None,
) -> List[Milestone]:
    if today is None:
        today = date.today()
    if marks is None:
        marks = settings.milestones
    if projection.status is not ProjectionStatus.projected:
        return []

    start, goal = projection.start_value, projection.goal_value
    total = goal - start
    milestones: List[Milestone] = []
    for fraction, label in marks:
        pct = int(round_half_up(fraction * 100))
        value = goal if fraction >= 1.0 else round_half_up(start + total * fraction, settings.milestone_precision)
        milestones.append(Milestone(
            pct=pct,
            label=label,
            value=value,
            projected_date=_milestone_date(value, projection, today),
            achieved=projection.progress_percentage >= pct,
        ))
    return milestones
