"""Proximity Matcher - distance filter shared by dating, nearby friends and events.

Checks, in order:
  1. Slider at max = no distance limit, always pass (nothing is resolved)
  2. No reference points (no location, no route) = pass
  3. Resolve candidate coordinate (stored, then geocode cache)
     Unresolved -> candidate's fallback policy (profiles excluded, events shown)
  4. Pass if within range of ANY reference point
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from DriftProximity.utils.logger import logger
from DriftProximity.utils.geo_utils import ReferencePoint, is_within_distance
from DriftProximity.proximity.candidates import (
    EventCandidate,
    FallbackPolicy,
    LocatableCandidate,
    ProfileCandidate,
)
from DriftProximity.proximity.geocode_cache import GeocodedCoordinateCache
from DriftProximity.proximity.preferences import FilterPreferences
from DriftProximity.proximity.reference_points import build_reference_points
from DriftProximity.proximity.resolver import resolve_coordinate

C = TypeVar("C", bound=LocatableCandidate)


@dataclass(frozen=True)
class ProximityMatcher:
    """Distance predicate with a fixed policy for unresolved candidates."""

    policy: FallbackPolicy
    label: str = "Proximity Filter"

    def matches(
        self,
        candidate: LocatableCandidate,
        preferences: FilterPreferences,
        reference_points: Sequence[ReferencePoint],
        geocoded_coords: Optional[GeocodedCoordinateCache] = None,
    ) -> bool:
        if preferences.is_unlimited_distance:
            return True

        if not reference_points:
            return True

        coordinate = resolve_coordinate(candidate, geocoded_coords)
        if coordinate is None:
            if self.policy is FallbackPolicy.FAIL_OPEN:
                return True
            logger.debug(
                f"[{self.label}] {candidate.display_name} has no coordinates - excluding from distance filter"
            )
            return False

        max_miles = float(preferences.max_distance_miles)
        passed = any(is_within_distance(ref, coordinate, max_miles) for ref in reference_points)
        if not passed:
            logger.trace(
                f"[{self.label}] {candidate.display_name} filtered out - outside {preferences.max_distance_miles} mi"
            )
        return passed


PROFILE_MATCHER = ProximityMatcher(FallbackPolicy.FAIL_CLOSED, "Profile Filter")
EVENT_MATCHER = ProximityMatcher(FallbackPolicy.FAIL_OPEN, "Event Filter")

_MATCHERS = {
    FallbackPolicy.FAIL_CLOSED: PROFILE_MATCHER,
    FallbackPolicy.FAIL_OPEN: EVENT_MATCHER,
}


def matches(
    candidate: LocatableCandidate,
    preferences: FilterPreferences,
    reference_points: Sequence[ReferencePoint],
    geocoded_coords: Optional[GeocodedCoordinateCache] = None,
) -> bool:
    """Match using the candidate kind's own fallback policy."""
    matcher = _MATCHERS[type(candidate).fallback_policy]
    return matcher.matches(candidate, preferences, reference_points, geocoded_coords)


def matches_profile(
    profile: ProfileCandidate,
    preferences: FilterPreferences,
    reference_points: Sequence[ReferencePoint],
    geocoded_coords: Optional[GeocodedCoordinateCache] = None,
) -> bool:
    return PROFILE_MATCHER.matches(profile, preferences, reference_points, geocoded_coords)


def matches_event(
    event: EventCandidate,
    preferences: FilterPreferences,
    reference_points: Sequence[ReferencePoint],
    geocoded_coords: Optional[GeocodedCoordinateCache] = None,
) -> bool:
    return EVENT_MATCHER.matches(event, preferences, reference_points, geocoded_coords)


def filter_candidates(
    candidates: Iterable[C],
    preferences: FilterPreferences,
    viewer: Optional[ReferencePoint],
    route_stops: Optional[Iterable[ReferencePoint]] = None,
    geocoded_coords: Optional[GeocodedCoordinateCache] = None,
    predicate: Optional[Callable[[C], bool]] = None,
    matcher: Optional[ProximityMatcher] = None,
) -> List[C]:
    """
    One filter pass over a candidate list.

    Reference points are built once; each candidate must pass the distance
    match AND the optional non-geo predicate. Input order is kept.

    Args:
        candidates: Profiles or events to filter
        preferences: Distance settings for this pass
        viewer: Viewer's current location (None if unknown)
        route_stops: Upcoming travel stops, used when include_route_stops is on
        geocoded_coords: Fallback coordinates keyed by candidate id
        predicate: Extra non-geo check (age, interests, category...)
        matcher: Force a matcher instead of the per-kind policy
    """
    reference_points = build_reference_points(viewer, preferences.include_route_stops, route_stops)

    result: List[C] = []
    for candidate in candidates:
        if matcher is not None:
            near = matcher.matches(candidate, preferences, reference_points, geocoded_coords)
        else:
            near = matches(candidate, preferences, reference_points, geocoded_coords)
        if near and (predicate is None or predicate(candidate)):
            result.append(candidate)
    return result
