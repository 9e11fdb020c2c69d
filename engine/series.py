"""
Checkpoint series helpers: ordering, whole-day spans and non-mutating append, so that every estimator sees an ascending, finite series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import bisect
import logging
import math
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional, Sequence, Tuple

from engine.models import Checkpoint
from engine.numeric import all_finite, require_finite

log = logging.getLogger(__name__)

_SECONDS_PER_DAY = 86400.0
_MAX_DAY_OFFSET = (date.max - date.min).days


def as_aware(ts: datetime) -> datetime:
    # naive timestamps are read as UTC so mixed series stay comparable
    return ts.replace(tzinfo=timezone.utc) if ts.tzinfo is None else ts


def sort_checkpoints(series: Iterable[Checkpoint]) -> Tuple[Checkpoint, ...]:
    # stable: same-instant samples keep their recording order
    return tuple(sorted(series, key=lambda c: as_aware(c.timestamp)))


def days_between(start: datetime, end: datetime) -> int:
    """Whole elapsed days from ``start`` to ``end``, truncated toward zero."""
    return math.trunc((as_aware(end) - as_aware(start)).total_seconds() / _SECONDS_PER_DAY)


def shift_date(start: date, days: float) -> Optional[date]:
    """``start`` moved by ``days`` whole days, or None when that falls outside the calendar."""
    if not math.isfinite(days) or abs(days) > _MAX_DAY_OFFSET:
        return None
    try:
        return start + timedelta(days=int(days))
    except OverflowError:
        return None


def series_is_finite(series: Sequence[Checkpoint]) -> bool:
    return all_finite(c.value for c in series)


def append_checkpoint(
    series: Sequence[Checkpoint],
    value: float,
    timestamp: Optional[datetime] = None,
) -> Tuple[Checkpoint, ...]:
    """Return a new ascending series containing ``series`` plus one checkpoint.

    The input is never mutated. A backdated ``timestamp`` is inserted at its
    chronological position. When ``timestamp`` is omitted the current time is
    used, in the timezone of the existing series. Naive timestamps are read
    as UTC.
    """
    value = require_finite("value", value)
    ordered = sort_checkpoints(series)
    if timestamp is None:
        tz = ordered[-1].timestamp.tzinfo if ordered else None
        timestamp = datetime.now(tz or timezone.utc)
    timestamp = as_aware(timestamp)

    idx = bisect.bisect_right([as_aware(c.timestamp) for c in ordered], timestamp)
    if idx < len(ordered):
        log.debug("append_checkpoint: backdated sample at %s inserted at %d/%d", timestamp, idx, len(ordered))
    return ordered[:idx] + (Checkpoint(timestamp=timestamp, value=value),) + ordered[idx:]
