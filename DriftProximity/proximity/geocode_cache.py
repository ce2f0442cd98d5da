"""Geocode cache snapshot - fallback coordinates produced by an external geocoder."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from DriftProximity.utils.logger import logger
from DriftProximity.utils.geo_utils import Coordinate

# candidate id -> Coordinate, read-only
GeocodedCoordinateCache = Mapping[str, Coordinate]

EMPTY_GEOCODE_CACHE: GeocodedCoordinateCache = MappingProxyType({})


def _to_coordinate(value: Any) -> Optional[Coordinate]:
    if isinstance(value, Coordinate):
        return value if value.is_valid else None
    if isinstance(value, Mapping):
        return Coordinate.from_lat_lon(value.get("latitude"), value.get("longitude"))
    try:
        lat, lon = value
    except (TypeError, ValueError):
        return None
    return Coordinate.from_lat_lon(lat, lon)


def build_geocode_cache(entries: Optional[Mapping[Any, Any]]) -> GeocodedCoordinateCache:
    """
    Freeze geocoder output into a read-only snapshot.

    Values may be Coordinates, (lat, lon) pairs or {"latitude", "longitude"}
    dicts. Entries that don't describe a valid coordinate are dropped.
    """
    if not entries:
        return EMPTY_GEOCODE_CACHE

    snapshot: Dict[str, Coordinate] = {}
    dropped = 0
    for key, value in entries.items():
        coordinate = _to_coordinate(value)
        if coordinate is None:
            dropped += 1
            continue
        snapshot[str(key)] = coordinate

    if dropped:
        logger.debug(f"Geocode cache: dropped {dropped} invalid entr{'y' if dropped == 1 else 'ies'}")
    return MappingProxyType(snapshot)
