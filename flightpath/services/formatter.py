"""Turn raw aircraft observations into enriched dashboard flight records."""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable, Optional

from flightpath.domain.geometry import bearing, bearing_to_compass, closest_approach
from flightpath.domain.mappings import UNKNOWN, get_aircraft_type_name, parse_callsign
from flightpath.models.flights import (
    AircraftObservation,
    FlightInfo,
    FormattedFlight,
    GeoPoint,
)

logger = logging.getLogger("flightpath.formatter")

FlightInfoLookup = Callable[[str], Awaitable[FlightInfo]]


async def _lookup_route(
    lookup: Optional[FlightInfoLookup], display_callsign: str
) -> FlightInfo:
    if lookup is None:
        return FlightInfo()
    try:
        return await lookup(display_callsign)
    except Exception as exc:
        logger.warning("Flight info lookup failed for %s: %s", display_callsign, exc)
        return FlightInfo()


async def format_flight(
    observation: AircraftObservation,
    house: GeoPoint,
    *,
    flight_info_lookup: Optional[FlightInfoLookup] = None,
) -> Optional[FormattedFlight]:
    """Build a :class:`FormattedFlight`, or ``None`` if the record is unusable."""

    try:
        if not observation.has_position:
            return None

        raw_callsign = observation.flight or observation.registration or UNKNOWN
        callsign = parse_callsign(raw_callsign)
        position = GeoPoint(observation.lat, observation.lon)

        approach = closest_approach(
            house, position, observation.track, observation.ground_speed
        )
        bearing_from_house = bearing(house, position)

        route = FlightInfo()
        if callsign.airline_code and callsign.display_callsign != raw_callsign:
            route = await _lookup_route(flight_info_lookup, callsign.display_callsign)

        return FormattedFlight(
            callsign=callsign.display_callsign,
            airline_code=callsign.airline_code,
            flight_number=callsign.flight_number,
            registration=observation.registration,
            origin=route.origin,
            destination=route.destination,
            equipment=get_aircraft_type_name(observation.type),
            aircraft_type=observation.type,
            latitude=observation.lat,
            longitude=observation.lon,
            altitude=observation.altitude,
            speed=observation.ground_speed,
            heading=observation.track,
            bearing=bearing_from_house,
            direction=bearing_to_compass(bearing_from_house),
            current_distance=approach.current_distance,
            closest_distance=approach.closest_distance,
            time_to_closest=approach.time_to_closest,
            is_direct_flyover=approach.is_direct_flyover,
            last_update=int(time.time() * 1000),
        )
    except Exception:
        logger.exception("Error formatting flight %r", observation)
        return None


__all__ = ["FlightInfoLookup", "format_flight"]
