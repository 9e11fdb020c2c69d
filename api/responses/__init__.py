"""
Response models for API endpoints, converting engine result records into JSON-safe payloads.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
import datetime as dt
from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, model_serializer

from engine.enums import ProjectionStatus, RateSource, ScheduleStatus
from engine.models import Checkpoint, Milestone, ProgressSummary, ProjectionResult, ScheduleVerdict
from engine.report import GoalReport


def _coerce(obj: Any) -> Any:
    # JSON has no NaN/Infinity; open-ended or invalid figures become null
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, (float, np.floating)):
        return float(obj) if math.isfinite(obj) else None
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class CheckpointOut(NpModel):

    timestamp: dt.datetime
    value: float

    @classmethod
    def from_checkpoint(cls, c: Checkpoint) -> "CheckpointOut":
        return cls(timestamp=c.timestamp, value=c.value)


class DataPointOut(NpModel):

    date: dt.date
    value: float


class MilestoneOut(NpModel):

    pct: int
    label: str
    value: float
    projected_date: Optional[dt.date] = None
    achieved: bool

    @classmethod
    def from_milestone(cls, m: Milestone) -> "MilestoneOut":
        return cls(pct=m.pct, label=m.label, value=m.value, projected_date=m.projected_date, achieved=m.achieved)


class ProjectionOut(NpModel):

    status: ProjectionStatus
    achieved: bool
    wrong_direction: bool
    days_remaining: Optional[int] = None
    days_remaining_infinite: bool = False
    projected_date: Optional[dt.date] = None
    current_value: Optional[float] = None
    goal_value: Optional[float] = None
    start_value: Optional[float] = None
    weekly_rate: float
    rate_source: RateSource
    data_points: List[DataPointOut] = []
    progress_percentage: int
    milestones: List[MilestoneOut] = []

    @classmethod
    def from_result(cls, result: ProjectionResult, milestones: List[Milestone] | None = None) -> "ProjectionOut":
        infinite = result.is_open_ended
        return cls(
            status=result.status,
            achieved=result.achieved,
            wrong_direction=result.wrong_direction,
            days_remaining=None if infinite else int(result.days_remaining),
            days_remaining_infinite=infinite,
            projected_date=result.projected_date,
            current_value=result.current_value,
            goal_value=result.goal_value,
            start_value=result.start_value,
            weekly_rate=result.weekly_rate,
            rate_source=result.rate_source,
            data_points=[DataPointOut(date=p.date, value=p.value) for p in result.data_points],
            progress_percentage=result.progress_percentage,
            milestones=[MilestoneOut.from_milestone(m) for m in milestones or []],
        )


class ScheduleOut(NpModel):

    status: ScheduleStatus
    projected_date: Optional[dt.date] = None
    days_needed: Optional[int] = None
    daily_rate: float
    on_track: bool
    message: str

    @classmethod
    def from_verdict(cls, v: ScheduleVerdict) -> "ScheduleOut":
        return cls(
            status=v.status,
            projected_date=v.projected_date,
            days_needed=v.days_needed,
            daily_rate=v.daily_rate,
            on_track=v.on_track,
            message=v.message,
        )


class ProgressSummaryOut(NpModel):

    percentage: int
    remaining: float
    days_left: int
    total: float
    done: float

    @classmethod
    def from_summary(cls, s: ProgressSummary) -> "ProgressSummaryOut":
        return cls(percentage=s.percentage, remaining=s.remaining, days_left=s.days_left, total=s.total, done=s.done)


class RateResponse(NpModel):
    weekly_rate: float
    samples: int


class ProgressResponse(NpModel):
    progress_percentage: int


class SeriesResponse(NpModel):
    checkpoints: List[CheckpointOut]
    current_value: float


class GoalReportResponse(NpModel):

    goal_id: str
    weekly_rate: float
    projection: ProjectionOut
    schedule: ScheduleOut
    progress: Optional[ProgressSummaryOut] = None
    cached: bool = False

    @classmethod
    def from_report(cls, report: GoalReport) -> "GoalReportResponse":
        return cls(
            goal_id=report.goal_id,
            weekly_rate=report.weekly_rate,
            projection=ProjectionOut.from_result(report.projection, report.milestones),
            schedule=ScheduleOut.from_verdict(report.schedule),
            progress=ProgressSummaryOut.from_summary(report.progress) if report.progress else None,
        )
