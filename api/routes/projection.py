"""
Projection routes: weekly rate estimation, percent-of-journey scoring and forward projection toward a target value.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter

from api.requests import ProgressRequest, ProjectionRequest, RateRequest, to_series
from api.responses import ProgressResponse, ProjectionOut, RateResponse
from api.routes.exception import handle_exceptions
from engine.progress import build_milestones, score_progress
from engine.projection import project
from engine.rate import estimate_weekly_rate
from services.projection_service import resolve_fallback_rate

router = APIRouter(tags=["Projection"])


@router.post("/rate", response_model=RateResponse, summary="Weekly rate over the recent checkpoint window")
@handle_exceptions
async def weekly_rate(req: RateRequest) -> RateResponse:
    series = to_series(req.checkpoints)
    return RateResponse(
        weekly_rate=estimate_weekly_rate(series, req.window_samples),
        samples=len(series),
    )


@router.post("/progress", response_model=ProgressResponse, summary="Percent of the journey completed")
@handle_exceptions
async def progress(req: ProgressRequest) -> ProgressResponse:
    return ProgressResponse(
        progress_percentage=score_progress(req.start_value, req.current_value, req.target_value),
    )


@router.post("/projection", response_model=ProjectionOut, summary="Projected completion date and weekly chart points")
@handle_exceptions
async def projection(req: ProjectionRequest) -> ProjectionOut:
    today = req.today or date.today()
    result = project(
        req.current_value,
        req.target_value,
        req.measured_rate,
        resolve_fallback_rate(req.fallback_rate, req.weekly_plan),
        req.horizon_cap_weeks,
        req.achieved_tolerance,
        start_value=req.start_value,
        today=today,
    )
    return ProjectionOut.from_result(result, build_milestones(result, today))
