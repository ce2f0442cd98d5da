"""Coordinate resolution for candidates."""
from __future__ import annotations

from typing import Optional

from DriftProximity.utils.geo_utils import Coordinate
from DriftProximity.proximity.candidates import LocatableCandidate
from DriftProximity.proximity.geocode_cache import GeocodedCoordinateCache


def resolve_coordinate(
    candidate: LocatableCandidate,
    geocoded_coords: Optional[GeocodedCoordinateCache] = None,
) -> Optional[Coordinate]:
    """
    Resolve where a candidate is.

    Order (first success wins):
    1. The candidate's stored coordinate, if valid
    2. The geocode cache entry for the candidate's id, if valid
    3. None (unresolved)
    """
    stored = candidate.stored_coordinate
    if stored is not None:
        return stored

    if geocoded_coords:
        cached = geocoded_coords.get(str(candidate.id))
        if cached is not None and cached.is_valid:
            return cached

    return None
