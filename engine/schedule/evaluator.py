"""
Deadline evaluation for goals with a target date, comparing the completion date implied by the long-run daily rate over the whole checkpoint series against the deadline.

The daily rate here deliberately spans the entire series, unlike the windowed weekly rate used for charting: a deadline verdict should follow the long-run trend rather than the last two weeks of noise.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Sequence

from config import settings
from engine.enums import ScheduleStatus
from engine.models import Checkpoint, ScheduleVerdict
from engine.numeric import is_finite, round_half_up
from engine.series import days_between, series_is_finite, shift_date, sort_checkpoints

log = logging.getLogger(__name__)


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def _format_date(d: date) -> str:
    return f"{d:%b} {d.day}, {d.year}"


def _inconclusive() -> ScheduleVerdict:
    return ScheduleVerdict(
        projected_date=None,
        days_needed=None,
        daily_rate=0.0,
        on_track=False,
        message=settings.schedule_message_inconclusive,
        status=ScheduleStatus.inconclusive,
    )


def _invalid() -> ScheduleVerdict:
    return ScheduleVerdict(
        projected_date=None,
        days_needed=None,
        daily_rate=0.0,
        on_track=False,
        message=settings.schedule_message_invalid,
        status=ScheduleStatus.invalid_input,
    )


def _moving_away(first: float, target: float, remaining: float, daily_rate: float) -> bool:
    """True when the trend leads away from a target the series has not yet passed.

    A series that already overshot the target in its intended direction is not
    moving away; its negative day count stands as already on track.
    """
    if remaining == 0 or (remaining > 0) == (daily_rate > 0):
        return False
    heading = target - first
    return heading == 0 or (heading > 0) != (daily_rate > 0)


def evaluate_schedule(
    series: Sequence[Checkpoint],
    target_value: float,
    target_date: date | datetime,
    *,
    today: date | None = None,
    min_daily_rate: float | None = None,
) -> ScheduleVerdict:
    if today is None:
        today = date.today()
    if min_daily_rate is None:
        min_daily_rate = settings.schedule_min_daily_rate

    if not is_finite(target_value) or not series_is_finite(series):
        log.debug("evaluate_schedule: non-finite target or checkpoint values")
        return _invalid()

    ordered = sort_checkpoints(series)
    if len(ordered) < 2:
        return _inconclusive()

    first, last = ordered[0], ordered[-1]
    span = max(settings.schedule_min_span_days, days_between(first.timestamp, last.timestamp))
    daily_rate = (last.value - first.value) / span

    if abs(daily_rate) < min_daily_rate:
        log.debug("evaluate_schedule: daily rate %.6f below %.6f, inconclusive", daily_rate, min_daily_rate)
        return _inconclusive()

    reported_rate = round_half_up(daily_rate, settings.schedule_rate_precision)
    remaining = float(target_value) - last.value
    ratio = remaining / daily_rate
    days_needed = math.ceil(ratio) if math.isfinite(ratio) else None
    projected = shift_date(today, days_needed) if days_needed is not None else None

    if _moving_away(first.value, float(target_value), remaining, daily_rate):
        # a negative day count here would land in the past and read as on track
        return ScheduleVerdict(
            projected_date=projected,
            days_needed=days_needed,
            daily_rate=reported_rate,
            on_track=False,
            message=settings.schedule_message_behind,
            status=ScheduleStatus.wrong_direction,
        )

    if projected is None:
        log.debug("evaluate_schedule: %.3g days to target is outside the calendar", ratio)
    on_track = projected is not None and projected <= _as_date(target_date)

    return ScheduleVerdict(
        projected_date=projected,
        days_needed=days_needed,
        daily_rate=reported_rate,
        on_track=on_track,
        message=(
            settings.schedule_message_on_track.format(date=_format_date(projected))
            if on_track
            else settings.schedule_message_behind
        ),
        status=ScheduleStatus.on_track if on_track else ScheduleStatus.behind,
    )
