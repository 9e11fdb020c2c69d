"""
Cache key construction for projection reports, keyed by a content hash over everything a report depends on.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import hashlib
import json
from datetime import date
from typing import Sequence

from engine.models import Checkpoint


def _slug(value: str) -> str:
    # Internal cache keys do not require reversibility; use strong stable hashing.
    return hashlib.sha256(value.encode()).hexdigest()[:32]


def fingerprint(
    checkpoints: Sequence[Checkpoint],
    target_value: float,
    target_date: date,
    fallback_rate: float = 0.0,
    today: date | None = None,
    *,
    start_value: float | None = None,
    current_value: float | None = None,
) -> str:
    payload = {
        "start": None if start_value is None else repr(float(start_value)),
        "current": None if current_value is None else repr(float(current_value)),
        "checkpoints": [[c.timestamp.isoformat(), repr(float(c.value))] for c in checkpoints],
        "target": repr(float(target_value)),
        "target_date": target_date.isoformat(),
        "fallback": repr(float(fallback_rate)),
        "today": today.isoformat() if today else None,
    }
    return _slug(json.dumps(payload, sort_keys=True))


def report(goal_id: str, digest: str) -> str:
    return f"pp:{_slug(goal_id)}:report:{digest}"


def reports(goal_id: str) -> str:
    return f"pp:{_slug(goal_id)}:report:*"
