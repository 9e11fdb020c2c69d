"""
Weekly rate estimation over the most recent checkpoints, using a sample-count window so that irregular logging frequency does not stretch or shrink the observation period.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from config import DAYS_PER_WEEK, settings
from engine.exceptions import InvalidInputError
from engine.models import Checkpoint
from engine.series import days_between, series_is_finite, sort_checkpoints

log = logging.getLogger(__name__)


def _window(series: Sequence[Checkpoint], samples: int) -> Tuple[Checkpoint, ...]:
    ordered = sort_checkpoints(series)
    return ordered[-samples:] if samples > 0 else ()


def estimate_weekly_rate(series: Sequence[Checkpoint], window_samples: int | None = None) -> float:
    """Signed change per 7 days between the first and last sample of the window.

    Returns 0.0 when the window holds fewer than two samples or when they fall
    on the same day. Raises :class:`InvalidInputError` for non-finite values.
    """
    if window_samples is None:
        window_samples = settings.rate_window_samples
    if not series_is_finite(series):
        raise InvalidInputError("checkpoint series contains non-finite values")

    recent = _window(series, window_samples)
    if len(recent) < 2:
        return 0.0

    first, last = recent[0], recent[-1]
    days = days_between(first.timestamp, last.timestamp)
    if days == 0:
        log.debug("estimate_weekly_rate: %d samples share one day, no trend", len(recent))
        return 0.0
    return (last.value - first.value) / days * DAYS_PER_WEEK
