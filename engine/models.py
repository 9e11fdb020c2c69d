"""
Value objects shared across the projection engine: checkpoints, goals and the result records produced by the projector, schedule evaluator and progress scorer.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple

from engine.enums import GoalType, ProjectionStatus, RateSource, ScheduleStatus


@dataclass(frozen=True)
class Checkpoint:
    timestamp: datetime
    value: float


@dataclass(frozen=True)
class Goal:
    id: str
    start_value: float
    current_value: float
    target_value: float
    start_date: datetime
    target_date: date
    checkpoints: Tuple[Checkpoint, ...]
    type: GoalType = GoalType.custom
    name: str = ""
    unit: str = ""
    completed: bool = False


@dataclass(frozen=True)
class DataPoint:
    date: date
    value: float


@dataclass(frozen=True)
class ProjectionResult:
    achieved: bool
    wrong_direction: bool
    days_remaining: float
    projected_date: Optional[date]
    current_value: float
    goal_value: float
    start_value: float
    weekly_rate: float
    data_points: Tuple[DataPoint, ...] = field(default_factory=tuple)
    progress_percentage: int = 0
    status: ProjectionStatus = ProjectionStatus.projected
    rate_source: RateSource = RateSource.none

    @property
    def is_open_ended(self) -> bool:
        return math.isinf(self.days_remaining)


@dataclass(frozen=True)
class ScheduleVerdict:
    projected_date: Optional[date]
    days_needed: Optional[int]
    daily_rate: float
    on_track: bool
    message: str
    status: ScheduleStatus = ScheduleStatus.inconclusive


@dataclass(frozen=True)
class Milestone:
    pct: int
    label: str
    value: float
    projected_date: Optional[date]
    achieved: bool


@dataclass(frozen=True)
class ProgressSummary:
    percentage: int
    remaining: float
    days_left: int
    total: float
    done: float
