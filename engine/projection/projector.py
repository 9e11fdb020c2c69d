"""
Forward projection of a tracked value toward its target by linear extrapolation of a weekly rate, producing the completion date, capped weekly chart points and achieved/wrong-direction flags.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import Optional, Tuple

from config import DAYS_PER_WEEK, settings
from engine.enums import ProjectionStatus, RateSource
from engine.models import DataPoint, ProjectionResult
from engine.numeric import all_finite, round_half_up
from engine.progress.score import score_progress
from engine.series import shift_date

log = logging.getLogger(__name__)


def _sign(x: float) -> int:
    return (x > 0) - (x < 0)


def _effective_rate(measured: float, fallback: float) -> Tuple[float, RateSource]:
    if measured != 0:
        return measured, RateSource.measured
    if fallback != 0:
        return fallback, RateSource.fallback
    return 0.0, RateSource.none


def _data_points(current: float, rate: float, weeks: int, today: date) -> Tuple[DataPoint, ...]:
    return tuple(
        DataPoint(
            date=today + timedelta(days=DAYS_PER_WEEK * w),
            value=round_half_up(current + rate * w, settings.data_point_precision),
        )
        for w in range(weeks + 1)
    )


def invalid_projection(current: float, target: float, start: float) -> ProjectionResult:
    return ProjectionResult(
        achieved=False,
        wrong_direction=False,
        days_remaining=math.inf,
        projected_date=None,
        current_value=current,
        goal_value=target,
        start_value=start,
        weekly_rate=0.0,
        progress_percentage=0,
        status=ProjectionStatus.invalid_input,
    )


def project(
    current_value: float,
    target_value: float,
    measured_rate: float,
    fallback_rate: Optional[float] = 0.0,
    horizon_cap_weeks: int | None = None,
    achieved_tolerance: float | None = None,
    *,
    start_value: Optional[float] = None,
    today: date | None = None,
) -> ProjectionResult:
    """Project when ``current_value`` reaches ``target_value`` at a weekly rate.

    ``measured_rate`` wins whenever it is non-zero; otherwise ``fallback_rate``
    (an externally derived estimate) is used. ``start_value`` is the goal's
    starting value and only feeds ``progress_percentage``; it defaults to
    ``current_value``.

    Being within ``achieved_tolerance`` of the target always reports the goal
    as achieved. No rate reports an open-ended result, and a rate pointing away
    from the target reports ``wrong_direction`` instead of a date. Non-finite
    inputs produce a result with status ``invalid_input``.
    """
    if horizon_cap_weeks is None:
        horizon_cap_weeks = settings.horizon_cap_weeks
    if achieved_tolerance is None:
        achieved_tolerance = settings.achieved_tolerance
    if today is None:
        today = date.today()
    measured_rate = 0.0 if measured_rate is None else measured_rate
    fallback_rate = 0.0 if fallback_rate is None else fallback_rate
    start = current_value if start_value is None else start_value

    if not all_finite((current_value, target_value, measured_rate, fallback_rate, start)):
        log.debug("project: non-finite input current=%r target=%r start=%r", current_value, target_value, start)
        return invalid_projection(current_value, target_value, start)

    current = float(current_value)
    target = float(target_value)
    start = float(start)
    diff = target - current

    if abs(diff) < achieved_tolerance or diff == 0:
        return ProjectionResult(
            achieved=True,
            wrong_direction=False,
            days_remaining=0,
            projected_date=today,
            current_value=current,
            goal_value=target,
            start_value=start,
            weekly_rate=0.0,
            progress_percentage=100,
            status=ProjectionStatus.achieved,
        )

    rate, source = _effective_rate(float(measured_rate), float(fallback_rate))
    progress = score_progress(start, current, target)

    if rate == 0:
        return ProjectionResult(
            achieved=False,
            wrong_direction=False,
            days_remaining=math.inf,
            projected_date=None,
            current_value=current,
            goal_value=target,
            start_value=start,
            weekly_rate=0.0,
            progress_percentage=progress,
            status=ProjectionStatus.no_trend,
            rate_source=source,
        )

    weekly_rate = round_half_up(rate, settings.weekly_rate_precision)
    if _sign(diff) != _sign(rate):
        return ProjectionResult(
            achieved=False,
            wrong_direction=True,
            days_remaining=math.inf,
            projected_date=None,
            current_value=current,
            goal_value=target,
            start_value=start,
            weekly_rate=weekly_rate,
            progress_percentage=progress,
            status=ProjectionStatus.wrong_direction,
            rate_source=source,
        )

    weeks_needed = abs(diff / rate)
    cap = max(0, horizon_cap_weeks)
    chart_weeks = cap if weeks_needed >= cap else math.floor(weeks_needed)
    days_needed = weeks_needed * DAYS_PER_WEEK
    projected_date = shift_date(today, round_half_up(days_needed)) if math.isfinite(days_needed) else None
    if projected_date is None:
        # too slow to land on the calendar, so the projection stays open-ended
        log.debug("project: %.3g weeks to target is past the last representable date", weeks_needed)
        days_remaining: float = math.inf
    else:
        days_remaining = (projected_date - today).days

    return ProjectionResult(
        achieved=False,
        wrong_direction=False,
        days_remaining=days_remaining,
        projected_date=projected_date,
        current_value=current,
        goal_value=target,
        start_value=start,
        weekly_rate=weekly_rate,
        data_points=_data_points(current, rate, chart_weeks, today),
        progress_percentage=progress,
        status=ProjectionStatus.projected,
        rate_source=source,
    )
