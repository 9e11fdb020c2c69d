"""
Enumerations for Goal Types, Rate Sources, Projection and Schedule outcomes

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class GoalType(str, Enum):
    weight = "weight"
    measurement = "measurement"
    fitness = "fitness"
    habit = "habit"
    custom = "custom"


class RateSource(str, Enum):
    measured = "measured"
    fallback = "fallback"
    none = "none"


class ProjectionStatus(str, Enum):
    achieved = "achieved"
    projected = "projected"
    no_trend = "no_trend"
    wrong_direction = "wrong_direction"
    invalid_input = "invalid_input"


class ScheduleStatus(str, Enum):
    on_track = "on_track"
    behind = "behind"
    inconclusive = "inconclusive"
    wrong_direction = "wrong_direction"
    invalid_input = "invalid_input"


class WeeklyPlan(str, Enum):
    lose2 = "lose2"
    lose1 = "lose1"
    lose05 = "lose05"
    maintain = "maintain"
    gain05 = "gain05"
    gain1 = "gain1"

    def daily_adjustment(self) -> float:
        from config import WEEKLY_PLAN_ADJUSTMENTS

        return WEEKLY_PLAN_ADJUSTMENTS[self.value]
