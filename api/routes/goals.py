"""
Goal routes: checkpoint ingestion on a caller-owned series, the cached full report for a goal snapshot, and cache invalidation.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from api.requests import AppendCheckpointRequest, GoalReportRequest, to_series
from api.responses import CheckpointOut, GoalReportResponse, SeriesResponse
from api.routes.exception import handle_exceptions
from engine.series import append_checkpoint
from services.projection_service import forget_goal, goal_report, resolve_fallback_rate

router = APIRouter(tags=["Goals"])


@router.post("/checkpoints", response_model=SeriesResponse, summary="Append a checkpoint to a series")
@handle_exceptions
async def add_checkpoint(req: AppendCheckpointRequest) -> SeriesResponse:
    series = append_checkpoint(to_series(req.checkpoints), req.value, req.timestamp)
    return SeriesResponse(
        checkpoints=[CheckpointOut.from_checkpoint(c) for c in series],
        current_value=series[-1].value,
    )


@router.post("/goals/report", response_model=GoalReportResponse, summary="Rate, projection, milestones and deadline verdict")
@handle_exceptions
async def report(req: GoalReportRequest) -> GoalReportResponse:
    return await goal_report(
        req.goal.to_goal(),
        resolve_fallback_rate(req.fallback_rate, req.weekly_plan),
        req.today,
    )


@router.delete("/goals/{goal_id}/report", summary="Drop cached reports for a goal")
@handle_exceptions
async def drop_report(goal_id: str) -> Dict[str, Any]:
    return {"goal_id": goal_id, "removed": await forget_goal(goal_id)}
