"""
Projection report cache, keyed by a content hash of the goal snapshot so any new checkpoint or changed target misses the cache.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from api.responses import GoalReportResponse
from config import settings
from store import keys
from store.client import redis_delete, redis_get, redis_scan, redis_set

log = logging.getLogger(__name__)


async def load(goal_id: str, digest: str) -> Optional[GoalReportResponse]:
    try:
        raw = await redis_get(keys.report(goal_id, digest))
        if raw:
            return GoalReportResponse.model_validate_json(raw)
    except ValidationError as exc:
        log.debug("Report cache entry unreadable %s/%s: %s", goal_id, digest, exc)
    return None


async def save(goal_id: str, digest: str, report: GoalReportResponse) -> None:
    await redis_set(
        keys.report(goal_id, digest),
        report.model_dump_json(),
        ttl=settings.projection_cache_ttl,
    )


async def invalidate(goal_id: str) -> int:
    stale = await redis_scan(keys.reports(goal_id))
    for key in stale:
        await redis_delete(key)
    return len(stale)
