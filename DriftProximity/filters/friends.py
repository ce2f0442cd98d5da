"""Nearby friends filter - shared interests AND distance."""
from __future__ import annotations

from typing import Iterable, List, Optional

from DriftProximity.utils.geo_utils import ReferencePoint
from DriftProximity.proximity.candidates import FallbackPolicy, ProfileCandidate
from DriftProximity.proximity.geocode_cache import GeocodedCoordinateCache
from DriftProximity.proximity.matcher import ProximityMatcher, filter_candidates
from DriftProximity.proximity.preferences import FilterPreferences

FRIENDS_MATCHER = ProximityMatcher(FallbackPolicy.FAIL_CLOSED, "Friends Filter")


def shares_interest(profile: ProfileCandidate, interests: Iterable[str]) -> bool:
    """True if the profile lists at least one of the interests (case-insensitive)."""
    wanted = {i.strip().lower() for i in interests if i and i.strip()}
    if not wanted:
        return True
    return any(i.strip().lower() in wanted for i in profile.interests)


def filter_nearby_friends(
    profiles: Iterable[ProfileCandidate],
    preferences: FilterPreferences,
    viewer: Optional[ReferencePoint],
    route_stops: Optional[Iterable[ReferencePoint]] = None,
    geocoded_coords: Optional[GeocodedCoordinateCache] = None,
    shared_interests: Optional[Iterable[str]] = None,
) -> List[ProfileCandidate]:
    predicate = None
    if shared_interests is not None:
        interests = list(shared_interests)
        predicate = lambda profile: shares_interest(profile, interests)  # noqa: E731
    return filter_candidates(
        profiles,
        preferences,
        viewer,
        route_stops,
        geocoded_coords,
        predicate=predicate,
        matcher=FRIENDS_MATCHER,
    )
