import pytest

from DriftProximity.utils.geo_utils import Coordinate
from DriftProximity.proximity.candidates import (
    EventCandidate,
    FallbackPolicy,
    ProfileCandidate,
    parse_event,
    parse_profile,
)
from DriftProximity.proximity.geocode_cache import build_geocode_cache


def test_policies_by_kind():
    assert ProfileCandidate.fallback_policy is FallbackPolicy.FAIL_CLOSED
    assert EventCandidate.fallback_policy is FallbackPolicy.FAIL_OPEN


def test_stored_coordinate_treats_sentinel_as_missing():
    assert ProfileCandidate(id="p1", latitude=-999, longitude=-999).stored_coordinate is None
    assert ProfileCandidate(id="p1", latitude=36.3, longitude=None).stored_coordinate is None
    assert ProfileCandidate(id="p1", latitude=36.3, longitude=-121.85).stored_coordinate == Coordinate(36.3, -121.85)


def test_parse_profile():
    profile = parse_profile(
        {
            "id": "a1b2",
            "name": "Sarah",
            "latitude": "36.27",
            "longitude": -121.81,
            "age": "28",
            "interests": ["Hiking", "Surfing"],
            "lifestyle": "van_life",
        }
    )
    assert profile is not None
    assert profile.id == "a1b2"
    assert profile.stored_coordinate == Coordinate(36.27, -121.81)
    assert profile.age == 28
    assert profile.interests == ["Hiking", "Surfing"]
    assert profile.display_name == "Sarah"


def test_parse_profile_tolerates_bad_fields():
    profile = parse_profile({"id": 7, "latitude": "n/a", "longitude": "null", "age": "old", "interests": "x"})
    assert profile is not None
    assert profile.id == "7"
    assert profile.latitude is None
    assert profile.longitude is None
    assert profile.age is None
    assert profile.interests == []
    assert profile.display_name == "?"


def test_parse_profile_without_id(log_records):
    assert parse_profile({"name": "Nobody"}) is None
    assert any("Missing profile id" in r["message"] for r in log_records)


def test_parse_event_uses_event_coordinates():
    event = parse_event({"id": "e1", "title": "Beach cleanup", "event_latitude": 45.52, "event_longitude": -122.67})
    assert event is not None
    assert event.stored_coordinate == Coordinate(45.52, -122.67)
    assert event.display_name == "Beach cleanup"


def test_parse_event_without_location():
    event = parse_event({"id": "e2", "title": "Location TBD"})
    assert event is not None
    assert event.stored_coordinate is None


def test_build_geocode_cache_accepts_several_shapes():
    cache = build_geocode_cache(
        {
            "a": Coordinate(36.27, -121.81),
            "b": (47.6, -122.3),
            "c": {"latitude": 45.5, "longitude": -122.6},
        }
    )
    assert cache["a"] == Coordinate(36.27, -121.81)
    assert cache["b"] == Coordinate(47.6, -122.3)
    assert cache["c"] == Coordinate(45.5, -122.6)


def test_build_geocode_cache_drops_invalid_entries(log_records):
    cache = build_geocode_cache({"a": (-999, -999), "b": "nowhere", "c": Coordinate(0, 500), "d": (1, 2)})
    assert list(cache.keys()) == ["d"]
    assert any("dropped 3 invalid entries" in r["message"] for r in log_records)


def test_geocode_cache_is_read_only():
    cache = build_geocode_cache({"a": (1, 2)})
    with pytest.raises(TypeError):
        cache["b"] = Coordinate(3, 4)


def test_empty_geocode_cache():
    assert len(build_geocode_cache(None)) == 0
    assert len(build_geocode_cache({})) == 0
