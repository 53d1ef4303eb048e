import math

import pytest

from flightpath.domain.geometry import (
    EARTH_RADIUS_MILES,
    bearing,
    bearing_to_compass,
    closest_approach,
    distance,
)
from flightpath.models import GeoPoint

HOUSE = GeoPoint(40.0, -75.0)


def _north_of_house(miles: float) -> GeoPoint:
    return GeoPoint(HOUSE.latitude + math.degrees(miles / EARTH_RADIUS_MILES), HOUSE.longitude)


def test_distance_to_self_is_zero():
    assert distance(HOUSE, HOUSE) == 0


def test_distance_is_symmetric():
    a = GeoPoint(51.4700, -0.4543)
    b = GeoPoint(40.6413, -73.7781)

    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, b) == pytest.approx(3451, rel=1e-2)


def test_distance_one_degree_of_longitude_at_equator():
    assert distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0)) == pytest.approx(
        EARTH_RADIUS_MILES * math.pi / 180
    )


@pytest.mark.parametrize(
    "target, expected",
    [
        (GeoPoint(1.0, 0.0), 0.0),
        (GeoPoint(0.0, 1.0), 90.0),
        (GeoPoint(-1.0, 0.0), 180.0),
        (GeoPoint(0.0, -1.0), 270.0),
    ],
)
def test_bearing_cardinal_directions(target, expected):
    assert bearing(GeoPoint(0.0, 0.0), target) == pytest.approx(expected)


def test_bearing_normalizes_negative_angles():
    result = bearing(GeoPoint(10.0, 10.0), GeoPoint(11.0, 9.0))

    assert 0 <= result < 360
    assert result > 270


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "N"),
        (22.4, "N"),
        (22.5, "NE"),
        (44, "NE"),
        (90, "E"),
        (180, "S"),
        (269, "W"),
        (315, "NW"),
        (337.5, "N"),
        (360, "N"),
    ],
)
def test_bearing_to_compass(value, expected):
    assert bearing_to_compass(value) == expected


@pytest.mark.parametrize("speed, heading", [(0, 180.0), (None, 180.0), (300, None)])
def test_closest_approach_without_velocity_is_now(speed, heading):
    aircraft = _north_of_house(10)

    result = closest_approach(HOUSE, aircraft, heading, speed)

    assert result.closest_distance == result.current_distance
    assert result.current_distance == pytest.approx(10)
    assert result.time_to_closest == 0
    assert result.is_direct_flyover is False


def test_closest_approach_receding_aircraft_is_now():
    # North of the house and flying north: bearing home is 180, angle 180
    result = closest_approach(HOUSE, _north_of_house(10), 0.0, 300)

    assert result.closest_distance == result.current_distance
    assert result.time_to_closest == 0
    assert result.is_direct_flyover is False


def test_closest_approach_heading_straight_at_house():
    result = closest_approach(HOUSE, _north_of_house(10), 180.0, 300)

    assert result.closest_distance == pytest.approx(0, abs=1e-6)
    assert result.time_to_closest == 104
    assert result.is_direct_flyover is True


def test_closest_approach_oblique_track():
    result = closest_approach(HOUSE, _north_of_house(10), 135.0, 300)

    assert result.closest_distance == pytest.approx(10 * math.sin(math.radians(45)), rel=1e-4)
    assert result.closest_distance <= result.current_distance
    assert result.time_to_closest == 74
    assert result.is_direct_flyover is False


def test_closest_approach_wraps_heading_across_north():
    # South of the house heading 350: bearing home is 0, so the angle is 10
    aircraft = GeoPoint(HOUSE.latitude - math.degrees(2 / EARTH_RADIUS_MILES), HOUSE.longitude)

    result = closest_approach(HOUSE, aircraft, 350.0, 200)

    assert result.closest_distance == pytest.approx(2 * math.sin(math.radians(10)), rel=1e-4)
    assert result.is_direct_flyover is True


def test_closest_approach_propagates_nan():
    result = closest_approach(HOUSE, GeoPoint(float("nan"), -75.0), 180.0, 300)

    assert math.isnan(result.current_distance)
    assert result.is_direct_flyover is False
