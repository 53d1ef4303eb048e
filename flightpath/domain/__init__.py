"""Approach geometry and callsign/aircraft lookups."""

from .geometry import bearing, bearing_to_compass, closest_approach, distance
from .mappings import get_aircraft_type_name, get_iata_airline_code, parse_callsign

__all__ = [
    "bearing",
    "bearing_to_compass",
    "closest_approach",
    "distance",
    "get_aircraft_type_name",
    "get_iata_airline_code",
    "parse_callsign",
]
