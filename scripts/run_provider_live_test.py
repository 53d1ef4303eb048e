#!/usr/bin/env python
"""
Run this to exercise a live flight data provider and the formatter without
starting the API server.

Usage (from repo root):
    HOUSE_LAT=40.6413 HOUSE_LON=-73.7781 python scripts/run_provider_live_test.py [provider]
"""

import asyncio
import sys

from flightpath.config import settings, validate_settings
from flightpath.ingestors import build_provider
from flightpath.models import GeoPoint
from flightpath.services import FlightPoller


async def main() -> None:
    if len(sys.argv) > 1:
        settings.flight_data_provider = sys.argv[1]
    validate_settings(settings)

    house = GeoPoint(settings.house_lat, settings.house_lon)
    poller = FlightPoller(
        build_provider(settings.flight_data_provider),
        house=house,
        radius_miles=settings.bounding_box_miles,
        altitude_ceiling_feet=settings.max_altitude_feet,
        poll_interval_seconds=settings.poll_interval_seconds,
    )

    print(
        f"=== Live {settings.flight_data_provider} test around {house.latitude}, "
        f"{house.longitude} ({settings.bounding_box_miles} mi, "
        f"< {settings.max_altitude_feet} ft) ===\n"
    )

    if not await poller.poll_once():
        print("Provider request failed; see log output.")
        return

    flights = poller.snapshot.flights
    if not flights:
        print("No aircraft overhead.")
        return

    print(f"Received {len(flights)} flights:")
    for idx, f in enumerate(flights, start=1):
        print(
            f"{idx}. {f.callsign!r} ({f.equipment}) "
            f"{f.current_distance:.1f} mi {f.direction}, alt={f.altitude} ft, "
            f"closest={f.closest_distance:.2f} mi in {f.time_to_closest}s"
            f"{' [FLYOVER]' if f.is_direct_flyover else ''}"
        )


if __name__ == "__main__":
    asyncio.run(main())
