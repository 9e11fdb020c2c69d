"""
Constants and configuration for the Progress Projection Engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, List, Tuple

from pydantic_settings import BaseSettings


REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
PROJECTION_TTL: int = int(os.getenv("PROJECTION_TTL", "3600"))

DAYS_PER_WEEK = 7

# daily calorie adjustment per weekly plan, used by the energy-balance fallback
WEEKLY_PLAN_ADJUSTMENTS: Dict[str, float] = {
    "lose2": -1000.0,
    "lose1": -500.0,
    "lose05": -250.0,
    "maintain": 0.0,
    "gain05": 250.0,
    "gain1": 500.0,
}


class Settings(BaseSettings):
    # weekly rate estimation: sample-count window, not wall-clock
    rate_window_samples: int = int(os.getenv("PROGRESS_RATE_WINDOW_SAMPLES", "14"))

    # projector
    horizon_cap_weeks: int = int(os.getenv("PROGRESS_HORIZON_CAP_WEEKS", "52"))
    achieved_tolerance: float = float(os.getenv("PROGRESS_ACHIEVED_TOLERANCE", "0.5"))
    weekly_rate_precision: int = 1
    data_point_precision: int = 1

    # schedule evaluation over the full series span
    schedule_min_daily_rate: float = 0.001
    schedule_min_span_days: int = 1
    schedule_rate_precision: int = 2
    schedule_message_inconclusive: str = "Not enough progress data yet"
    schedule_message_on_track: str = "On track! Estimated {date}"
    schedule_message_behind: str = "Behind schedule. Need to increase effort."
    schedule_message_invalid: str = "Progress data contains invalid values"

    # milestones as (fraction of journey, label)
    milestones: List[Tuple[float, str]] = [
        (0.25, "25% of goal"),
        (0.50, "Halfway!"),
        (0.75, "75% of goal"),
        (1.00, "Goal reached!"),
    ]
    milestone_precision: int = 1

    # energy-balance fallback: kcal per unit of tracked quantity (3500 kcal ~ 1 lb)
    energy_kcal_per_unit: float = 3500.0

    # goal lifecycle defaults
    default_goal_horizon_days: int = 90
    default_goal_type: str = "custom"

    projection_cache_ttl: int = PROJECTION_TTL
    store_redis_retry_cooldown_seconds: float = 10.0
    store_fallback_max_items: int = 10_000

    model_config = {
        "env_prefix": "PROGRESS_",
        "extra": "ignore",
    }


settings = Settings()
