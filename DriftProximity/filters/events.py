"""Community event filter - category AND distance. Events without a location stay visible."""
from __future__ import annotations

from typing import Iterable, List, Optional

from DriftProximity.utils.geo_utils import ReferencePoint
from DriftProximity.proximity.candidates import EventCandidate
from DriftProximity.proximity.geocode_cache import GeocodedCoordinateCache
from DriftProximity.proximity.matcher import EVENT_MATCHER, filter_candidates
from DriftProximity.proximity.preferences import FilterPreferences


def filter_events(
    events: Iterable[EventCandidate],
    preferences: FilterPreferences,
    viewer: Optional[ReferencePoint],
    route_stops: Optional[Iterable[ReferencePoint]] = None,
    geocoded_coords: Optional[GeocodedCoordinateCache] = None,
    categories: Optional[Iterable[str]] = None,
) -> List[EventCandidate]:
    predicate = None
    if categories is not None:
        allowed = set(categories)
        predicate = lambda event: event.category in allowed  # noqa: E731
    return filter_candidates(
        events,
        preferences,
        viewer,
        route_stops,
        geocoded_coords,
        predicate=predicate,
        matcher=EVENT_MATCHER,
    )
