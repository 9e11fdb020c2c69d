"""
Percent-of-journey scoring from start, current and target values, plus the per-goal progress summary (remaining distance and days left until the deadline).

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import date

from engine.models import Goal, ProgressSummary
from engine.numeric import require_finite, round_half_up


def score_progress(start_value: float, current_value: float, target_value: float) -> int:
    """Share of the start-to-target distance already covered, clamped to 0..100.

    Overshooting the target still scores 100; a zero-length journey scores 0.
    """
    start = require_finite("start_value", start_value)
    current = require_finite("current_value", current_value)
    target = require_finite("target_value", target_value)

    total_journey = abs(start - target)
    if total_journey <= 0:
        return 0
    completed = abs(start - current)
    return int(min(100.0, round_half_up(completed / total_journey * 100)))


def summarize(goal: Goal, today: date | None = None) -> ProgressSummary:
    if today is None:
        today = date.today()
    total = abs(goal.target_value - goal.start_value)
    done = abs(goal.current_value - goal.start_value)
    return ProgressSummary(
        percentage=score_progress(goal.start_value, goal.current_value, goal.target_value),
        remaining=abs(goal.target_value - goal.current_value),
        days_left=max(0, (goal.target_date - today).days),
        total=total,
        done=done,
    )
