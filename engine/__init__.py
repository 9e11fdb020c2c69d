"""
Engine Packages for the Progress Projection Engine

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.enums import GoalType, ProjectionStatus, RateSource, ScheduleStatus, WeeklyPlan
from engine.exceptions import InvalidInputError, ProgressEngineError
from engine.models import Checkpoint, Goal, ProjectionResult, ScheduleVerdict
from engine.series import append_checkpoint
from engine.rate import estimate_weekly_rate
from engine.progress import score_progress
from engine.projection import project
from engine.schedule import evaluate_schedule

__all__ = [
    "GoalType", "ProjectionStatus", "RateSource", "ScheduleStatus", "WeeklyPlan",
    "InvalidInputError", "ProgressEngineError",
    "Checkpoint", "Goal", "ProjectionResult", "ScheduleVerdict",
    "append_checkpoint", "estimate_weekly_rate", "score_progress", "project", "evaluate_schedule",
]
