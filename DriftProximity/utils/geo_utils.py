"""Geographic utility functions for distance calculations."""
from __future__ import annotations

import math
from dataclasses import dataclass
from math import radians, sin, cos, sqrt, atan2
from typing import Any, Optional

EARTH_RADIUS_MILES = 3959.0  # mean Earth radius, statute miles

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


def is_valid(lat: float, lon: float) -> bool:
    """
    Check whether a latitude/longitude pair is a real coordinate.

    Out-of-range values (including the -999 "not set" sentinel) and NaN
    are rejected. Never raises.
    """
    try:
        return abs(lat) <= MAX_LATITUDE and abs(lon) <= MAX_LONGITUDE
    except TypeError:
        return False


@dataclass(frozen=True)
class Coordinate:
    """A (latitude, longitude) pair in decimal degrees."""

    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        return is_valid(self.latitude, self.longitude)

    @classmethod
    def from_lat_lon(cls, lat: Any, lon: Any) -> Optional[Coordinate]:
        """
        Build a Coordinate from raw values, or None if they don't describe one.

        Accepts anything float() accepts (numbers, numeric strings).
        """
        if lat is None or lon is None:
            return None
        try:
            lat_f, lon_f = float(lat), float(lon)
        except (TypeError, ValueError):
            return None
        if not is_valid(lat_f, lon_f):
            return None
        return cls(lat_f, lon_f)


# Kept as a separate name: a place distance is measured *from*, never a candidate.
ReferencePoint = Coordinate


def haversine_miles(a: Coordinate, b: Coordinate) -> float:
    """
    Calculate great-circle distance between two points in statute miles.

    Args:
        a, b: Coordinates (latitude, longitude)

    Returns:
        Distance in miles
    """
    d_lat = radians(b.latitude - a.latitude)
    d_lon = radians(b.longitude - a.longitude)

    h = sin(d_lat / 2) ** 2 + cos(radians(a.latitude)) * cos(radians(b.latitude)) * sin(d_lon / 2) ** 2
    # rounding can push h a hair outside [0, 1] near antipodes
    h = min(1.0, max(0.0, h))
    c = 2 * atan2(sqrt(h), sqrt(1 - h))

    return EARTH_RADIUS_MILES * c


def is_within_distance(a: Coordinate, b: Coordinate, max_miles: float) -> bool:
    """Check if two points are within max_miles of each other (inclusive)."""
    return haversine_miles(a, b) <= max_miles


def distance_miles_rounded(a: Optional[Coordinate], b: Optional[Coordinate]) -> Optional[int]:
    """
    Distance for display on cards, rounded half-up to whole miles.

    Returns None if either side is missing.
    """
    if a is None or b is None:
        return None
    return int(math.floor(haversine_miles(a, b) + 0.5))
