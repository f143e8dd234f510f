"""
BlogHub Backend — Health Check Route
=====================================

What:  Liveness/readiness probe for Docker and load balancers.
How:   Pings the store with SELECT 1. Served outside the API prefix, so it
       needs no bearer token.

Status levels:
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503)
"""

import time

from fastapi import APIRouter, Response

from bloghub import __version__
from bloghub.database import store
from bloghub.schemas.common import HealthResponse

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check(response: Response) -> HealthResponse:
    connected = await store.ping()
    if not connected:
        response.status_code = 503

    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
