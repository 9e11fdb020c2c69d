"""
Energy-balance fallback rate for weight goals: converts a planned daily calorie surplus or deficit into an expected weekly change, for use when measured trend data is flat or missing.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from config import DAYS_PER_WEEK, settings
from engine.enums import WeeklyPlan
from engine.numeric import require_finite


def energy_balance_rate(daily_delta_kcal: float, kcal_per_unit: float | None = None) -> float:
    if kcal_per_unit is None:
        kcal_per_unit = settings.energy_kcal_per_unit
    daily_delta_kcal = require_finite("daily_delta_kcal", daily_delta_kcal)
    kcal_per_unit = require_finite("kcal_per_unit", kcal_per_unit)
    if kcal_per_unit <= 0:
        return 0.0
    return daily_delta_kcal * DAYS_PER_WEEK / kcal_per_unit


def plan_rate(plan: WeeklyPlan | str, kcal_per_unit: float | None = None) -> float:
    # unknown plan names fall back to maintenance
    try:
        plan = WeeklyPlan(plan)
    except ValueError:
        plan = WeeklyPlan.maintain
    return energy_balance_rate(plan.daily_adjustment(), kcal_per_unit)
