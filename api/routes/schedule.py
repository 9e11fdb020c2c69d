"""
Schedule route judging whether the long-run checkpoint trend meets a deadline.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.requests import ScheduleRequest, to_series
from api.responses import ScheduleOut
from api.routes.exception import handle_exceptions
from engine.schedule import evaluate_schedule

router = APIRouter(tags=["Schedule"])


@router.post("/schedule", response_model=ScheduleOut, summary="On-track verdict against a target date")
@handle_exceptions
async def schedule(req: ScheduleRequest) -> ScheduleOut:
    verdict = evaluate_schedule(
        to_series(req.checkpoints),
        req.target_value,
        req.target_date,
        today=req.today,
    )
    return ScheduleOut.from_verdict(verdict)
