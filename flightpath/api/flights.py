"""Flight list endpoint consumed by the dashboard."""

from __future__ import annotations

from fastapi import APIRouter, Request

from flightpath.models import FlightSnapshot, FormattedFlight

router = APIRouter(prefix="/api", tags=["flights"])


def current_snapshot(request: Request) -> FlightSnapshot:
    """Return the last published snapshot, or an empty one before the first poll."""

    poller = getattr(request.app.state, "poller", None)
    if poller is None:
        return FlightSnapshot()
    return poller.snapshot


@router.get("/flights", response_model=list[FormattedFlight], summary="Nearby flights")
def list_flights(request: Request) -> list[FormattedFlight]:
    """Return the flights published by the most recent successful poll."""

    return list(current_snapshot(request).flights)
