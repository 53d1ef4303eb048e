"""Great-circle geometry and closest-approach projection for nearby aircraft."""

from __future__ import annotations

import math

from flightpath.models.flights import ApproachResult, GeoPoint

EARTH_RADIUS_MILES = 3958.8
KNOTS_TO_MPH = 1.15078
DIRECT_FLYOVER_THRESHOLD_MILES = 0.5

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def distance(p1: GeoPoint, p2: GeoPoint) -> float:
    """Return the haversine distance between two points in statute miles."""

    d_lat = math.radians(p2.latitude - p1.latitude)
    d_lon = math.radians(p2.longitude - p1.longitude)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(p1.latitude))
        * math.cos(math.radians(p2.latitude))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def bearing(origin: GeoPoint, target: GeoPoint) -> float:
    """Return the initial bearing from ``origin`` to ``target`` in [0, 360)."""

    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(target.latitude)
    d_lon = math.radians(target.longitude - origin.longitude)

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)

    return (math.degrees(math.atan2(y, x)) + 360) % 360


def bearing_to_compass(value: float) -> str:
    """Bucket a bearing into one of eight compass points.

    Ties at the sector boundaries go to the higher sector, so 22.5 is "NE".
    """

    index = int(math.floor(value / 45 + 0.5)) % 8
    return COMPASS_POINTS[index]


def _closest_now(current_distance: float) -> ApproachResult:
    return ApproachResult(
        current_distance=current_distance,
        closest_distance=current_distance,
        time_to_closest=0,
        is_direct_flyover=False,
    )


def closest_approach(
    house: GeoPoint,
    aircraft: GeoPoint,
    heading: float | None,
    speed_knots: float | None,
) -> ApproachResult:
    """Project the aircraft's straight-line track to its closest point to the house.

    The track is treated as a straight line on a locally flat patch of the
    sphere: the angle between the aircraft's heading and the bearing back to
    the house splits the current distance into an along-track leg (time to
    closest approach) and a cross-track leg (closest distance). Without a
    usable velocity, or when the aircraft is moving away, the closest point is
    "now".
    """

    current_distance = distance(house, aircraft)

    if not speed_knots or heading is None:
        return _closest_now(current_distance)

    speed_mph = speed_knots * KNOTS_TO_MPH

    bearing_to_house = bearing(aircraft, house)
    angle_diff = abs(bearing_to_house - heading)
    approach_angle = min(angle_diff, 360 - angle_diff)

    if approach_angle > 90:
        return _closest_now(current_distance)

    approach_angle_rad = math.radians(approach_angle)
    time_to_closest_hours = (current_distance / speed_mph) * math.cos(approach_angle_rad)
    closest_distance = current_distance * math.sin(approach_angle_rad)

    time_to_closest = max(0.0, time_to_closest_hours * 3600)

    return ApproachResult(
        current_distance=current_distance,
        closest_distance=closest_distance,
        time_to_closest=_round_half_up(time_to_closest),
        is_direct_flyover=closest_distance < DIRECT_FLYOVER_THRESHOLD_MILES,
    )


def _round_half_up(value: float) -> float | int:
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


__all__ = [
    "COMPASS_POINTS",
    "DIRECT_FLYOVER_THRESHOLD_MILES",
    "EARTH_RADIUS_MILES",
    "KNOTS_TO_MPH",
    "bearing",
    "bearing_to_compass",
    "closest_approach",
    "distance",
]
