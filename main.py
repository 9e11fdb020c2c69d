"""
Entry point for the Progress Projection Engine API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from api.routes import router
from config import settings
from store.client import get_redis, is_using_fallback

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await get_redis()
    log.info(
        "Projection engine ready (cache=%s, window=%d samples, horizon=%d weeks)",
        "memory" if is_using_fallback() else "redis",
        settings.rate_window_samples,
        settings.horizon_cap_weeks,
    )
    yield


app = FastAPI(
    title="Progress Projection Engine",
    description="Rate estimation, target-date projection and deadline evaluation over sparse checkpoint series.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=4323,
        log_level="info",
        access_log=True,
    )
