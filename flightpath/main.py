from __future__ import annotations

import asyncio
import contextlib
from datetime import datetime, timezone
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from flightpath.api import api_router
from flightpath.config import settings, validate_settings
from flightpath.ingestors import build_provider
from flightpath.models import GeoPoint
from flightpath.services import FlightPoller

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("flightpath")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate configuration, then run the flight poller for the app's lifetime."""

    validate_settings(settings)

    house = GeoPoint(settings.house_lat, settings.house_lon)
    logger.info(
        "Configuration: house=%s radius_miles=%s max_altitude_feet=%s "
        "poll_interval_seconds=%s provider=%s",
        (house.latitude, house.longitude),
        settings.bounding_box_miles,
        settings.max_altitude_feet,
        settings.poll_interval_seconds,
        settings.flight_data_provider,
    )

    app.state.started_at = datetime.now(timezone.utc)
    app.state.poller = FlightPoller(
        build_provider(settings.flight_data_provider, timeout=settings.provider_timeout),
        house=house,
        radius_miles=settings.bounding_box_miles,
        altitude_ceiling_feet=settings.max_altitude_feet,
        poll_interval_seconds=settings.poll_interval_seconds,
    )
    app.state.poller_task = asyncio.create_task(app.state.poller.run())
    logger.info(
        "Scheduled polling every %s seconds", settings.poll_interval_seconds
    )

    try:
        yield
    finally:
        task = app.state.poller_task
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task


app = FastAPI(title="Flightpath Tracker", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "HTTP %s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


app.include_router(api_router)
