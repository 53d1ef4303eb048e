"""Status and health check endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from flightpath.api.flights import current_snapshot
from flightpath.config import settings
from flightpath.models import StatusResponse

router = APIRouter()


@router.get("/healthz", summary="Health check")
def health_check() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok", "env": settings.flightpath_env}


@router.get("/api/status", response_model=StatusResponse, summary="Poller status")
def poller_status(request: Request) -> StatusResponse:
    """Report uptime and the freshness of the served flight list."""

    snapshot = current_snapshot(request)
    started_at = getattr(request.app.state, "started_at", None) or datetime.now(
        timezone.utc
    )
    uptime = datetime.now(timezone.utc) - started_at

    return StatusResponse(
        status="ok",
        uptime_seconds=int(uptime.total_seconds()),
        last_update_timestamp=snapshot.updated_at,
        flight_count=len(snapshot.flights),
        provider=settings.flight_data_provider,
    )
