"""
Service endpoints that do not touch the donation store.

``/health`` is a liveness probe reporting uptime and the configured
environment; ``/api`` returns a static descriptor listing the main
endpoints so clients can discover where donations are served.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from donation_tracker.app.schemas.common import ApiInfo, HealthRead

router = APIRouter()


@router.get("/health", response_model=HealthRead)
def health(request: Request) -> HealthRead:
    app_settings = request.app.state.settings
    return HealthRead(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=time.monotonic() - request.app.state.started_at,
        environment=app_settings.environment,
    )


@router.get("/api", response_model=ApiInfo)
def api_info(request: Request) -> ApiInfo:
    app_settings = request.app.state.settings
    donations_path = f"{app_settings.api_prefix}/donations"
    return ApiInfo(
        name=app_settings.project_name,
        version=app_settings.api_version,
        description=app_settings.description,
        endpoints={
            "donations": donations_path,
            "health": "/health",
            "stats": f"{donations_path}/stats",
        },
    )
