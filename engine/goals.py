"""
Goal snapshot lifecycle: creation with a seeded checkpoint and checkpoint ingestion that recomputes the current value and the direction-aware completion flag. Every operation returns a new snapshot.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional

from config import settings
from engine.enums import GoalType
from engine.models import Checkpoint, Goal
from engine.numeric import require_finite
from engine.series import append_checkpoint


def is_complete(start_value: float, target_value: float, value: float) -> bool:
    if target_value < start_value:
        return value <= target_value
    return value >= target_value


def create_goal(
    name: str,
    current_value: float,
    target_value: float,
    *,
    goal_id: Optional[str] = None,
    goal_type: GoalType | str | None = None,
    unit: str = "",
    start_date: Optional[datetime] = None,
    target_date: Optional[date] = None,
) -> Goal:
    current_value = require_finite("current_value", current_value)
    target_value = require_finite("target_value", target_value)
    if start_date is None:
        start_date = datetime.now(timezone.utc)
    if target_date is None:
        target_date = (start_date + timedelta(days=settings.default_goal_horizon_days)).date()

    return Goal(
        id=goal_id or uuid.uuid4().hex[:12],
        type=GoalType(goal_type or settings.default_goal_type),
        name=name,
        start_value=current_value,
        current_value=current_value,
        target_value=target_value,
        unit=unit,
        start_date=start_date,
        target_date=target_date,
        checkpoints=(Checkpoint(timestamp=start_date, value=current_value),),
        completed=False,
    )


def record_checkpoint(goal: Goal, value: float, timestamp: Optional[datetime] = None) -> Goal:
    checkpoints = append_checkpoint(goal.checkpoints, value, timestamp)
    current = checkpoints[-1].value
    return dataclasses.replace(
        goal,
        checkpoints=checkpoints,
        current_value=current,
        completed=is_complete(goal.start_value, goal.target_value, current),
    )


def active_goals(goals: Iterable[Goal]) -> List[Goal]:
    return [g for g in goals if not g.completed]


def completed_goals(goals: Iterable[Goal]) -> List[Goal]:
    return [g for g in goals if g.completed]
