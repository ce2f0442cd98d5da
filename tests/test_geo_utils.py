import math

import pytest

from DriftProximity.utils.geo_utils import (
    EARTH_RADIUS_MILES,
    Coordinate,
    distance_miles_rounded,
    haversine_miles,
    is_valid,
    is_within_distance,
)
from tests.conftest import BIG_SUR, PORTLAND, SEATTLE


def test_is_valid_accepts_range_bounds():
    assert is_valid(90, 180) is True
    assert is_valid(-90, -180) is True
    assert is_valid(0, 0) is True


def test_is_valid_rejects_sentinel_and_out_of_range():
    assert is_valid(-999, 0) is False
    assert is_valid(0, -999) is False
    assert is_valid(90.0001, 0) is False
    assert is_valid(0, 180.5) is False


def test_is_valid_rejects_nan_and_none():
    assert is_valid(float("nan"), 0) is False
    assert is_valid(None, 0) is False


def test_from_lat_lon_parses_numeric_strings():
    assert Coordinate.from_lat_lon("36.2704", "-121.8081") == BIG_SUR


def test_from_lat_lon_returns_none_for_unusable_values():
    assert Coordinate.from_lat_lon(None, -121.8) is None
    assert Coordinate.from_lat_lon(-999, -999) is None
    assert Coordinate.from_lat_lon("abc", 1) is None
    assert Coordinate.from_lat_lon(float("inf"), 0) is None


def test_one_degree_of_longitude_on_equator():
    expected = EARTH_RADIUS_MILES * math.pi / 180
    assert haversine_miles(Coordinate(0, 0), Coordinate(0, 1)) == pytest.approx(expected)


def test_haversine_is_symmetric():
    pairs = [(BIG_SUR, SEATTLE), (SEATTLE, PORTLAND), (Coordinate(-33.9, 151.2), Coordinate(51.5, -0.1))]
    for a, b in pairs:
        assert haversine_miles(a, b) == haversine_miles(b, a)


def test_haversine_identity_is_zero():
    for point in (BIG_SUR, SEATTLE, Coordinate(90, 180), Coordinate(-90, -180)):
        assert haversine_miles(point, point) == 0


def test_antipodal_points_do_not_raise():
    assert haversine_miles(Coordinate(0, 0), Coordinate(0, 180)) == pytest.approx(EARTH_RADIUS_MILES * math.pi)


def test_known_distances():
    # Big Sur -> a few miles up the coast
    assert haversine_miles(BIG_SUR, Coordinate(36.3, -121.85)) < 5
    # Big Sur -> Seattle, roughly 780 miles
    assert 700 < haversine_miles(BIG_SUR, SEATTLE) < 850
    # Portland stop -> downtown
    assert haversine_miles(PORTLAND, Coordinate(45.52, -122.67)) < 1


def test_is_within_distance_is_inclusive():
    a, b = Coordinate(0, 0), Coordinate(0, 1)
    exact = haversine_miles(a, b)
    assert is_within_distance(a, b, exact) is True
    assert is_within_distance(a, b, exact - 0.01) is False


def test_distance_miles_rounded():
    assert distance_miles_rounded(Coordinate(0, 0), Coordinate(0, 1)) == 69
    assert distance_miles_rounded(BIG_SUR, BIG_SUR) == 0


def test_distance_miles_rounded_missing_side():
    assert distance_miles_rounded(None, BIG_SUR) is None
    assert distance_miles_rounded(BIG_SUR, None) is None
