from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from engine.enums import GoalType, WeeklyPlan
from engine.models import Checkpoint, Goal
from engine.series import as_aware, sort_checkpoints


class CheckpointIn(BaseModel):
    timestamp: datetime
    value: float

    @field_validator("timestamp")
    @classmethod
    def utc_if_naive(cls, v: datetime) -> datetime:
        return as_aware(v)

    def to_checkpoint(self) -> Checkpoint:
        return Checkpoint(timestamp=self.timestamp, value=self.value)


def to_series(checkpoints: List[CheckpointIn]) -> List[Checkpoint]:
    return [c.to_checkpoint() for c in checkpoints]


class RateRequest(BaseModel):
    checkpoints: List[CheckpointIn]
    window_samples: Optional[int] = Field(default=None, ge=1, le=1000)


class ProgressRequest(BaseModel):
    start_value: float
    current_value: float
    target_value: float


class ProjectionRequest(BaseModel):
    current_value: float
    target_value: float
    measured_rate: float = 0.0
    fallback_rate: float = 0.0
    weekly_plan: Optional[WeeklyPlan] = None
    start_value: Optional[float] = None
    horizon_cap_weeks: Optional[int] = Field(default=None, ge=0, le=520)
    achieved_tolerance: Optional[float] = Field(default=None, ge=0.0)
    today: Optional[date] = None


class ScheduleRequest(BaseModel):
    checkpoints: List[CheckpointIn]
    target_value: float
    target_date: date
    today: Optional[date] = None


class AppendCheckpointRequest(BaseModel):
    checkpoints: List[CheckpointIn] = Field(default_factory=list)
    value: float
    timestamp: Optional[datetime] = None

    @field_validator("timestamp")
    @classmethod
    def utc_if_naive(cls, v: Optional[datetime]) -> Optional[datetime]:
        return None if v is None else as_aware(v)


class GoalIn(BaseModel):
    id: str
    type: GoalType = GoalType.custom
    name: str = ""
    start_value: float
    current_value: float
    target_value: float
    unit: str = ""
    start_date: datetime
    target_date: date
    checkpoints: List[CheckpointIn] = Field(min_length=1)
    completed: bool = False

    @field_validator("start_date")
    @classmethod
    def utc_if_naive(cls, v: datetime) -> datetime:
        return as_aware(v)

    def to_goal(self) -> Goal:
        return Goal(
            id=self.id,
            type=self.type,
            name=self.name,
            start_value=self.start_value,
            current_value=self.current_value,
            target_value=self.target_value,
            unit=self.unit,
            start_date=self.start_date,
            target_date=self.target_date,
            checkpoints=sort_checkpoints(to_series(self.checkpoints)),
            completed=self.completed,
        )


class GoalReportRequest(BaseModel):
    goal: GoalIn
    fallback_rate: float = 0.0
    weekly_plan: Optional[WeeklyPlan] = None
    today: Optional[date] = None
