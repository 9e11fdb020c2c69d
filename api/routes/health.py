"""
Health check route reporting cache connectivity and the active projection tuning.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from api.routes.exception import handle_exceptions
from config import settings
from store.client import get_redis, is_using_fallback

router = APIRouter(tags=["Health"])


@router.get("/health")
@handle_exceptions
async def health() -> Dict[str, Any]:
    await get_redis()
    return {
        "status": "ok",
        "cache": "memory" if is_using_fallback() else "redis",
        "engine": {
            "rate_window_samples": settings.rate_window_samples,
            "horizon_cap_weeks": settings.horizon_cap_weeks,
            "achieved_tolerance": settings.achieved_tolerance,
        },
    }
