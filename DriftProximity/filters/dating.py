"""Dating match filter - age range AND distance."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from DriftProximity.utils.geo_utils import ReferencePoint
from DriftProximity.proximity.candidates import FallbackPolicy, ProfileCandidate
from DriftProximity.proximity.geocode_cache import GeocodedCoordinateCache
from DriftProximity.proximity.matcher import ProximityMatcher, filter_candidates
from DriftProximity.proximity.preferences import FilterPreferences

DATING_MATCHER = ProximityMatcher(FallbackPolicy.FAIL_CLOSED, "Dating Filter")


@dataclass(frozen=True)
class AgeRange:
    min_age: int = 18
    max_age: int = 80

    def contains(self, age: Optional[int]) -> bool:
        # unknown age is not held against the profile
        if age is None:
            return True
        return self.min_age <= age <= self.max_age


def filter_dating_profiles(
    profiles: Iterable[ProfileCandidate],
    preferences: FilterPreferences,
    viewer: Optional[ReferencePoint],
    route_stops: Optional[Iterable[ReferencePoint]] = None,
    geocoded_coords: Optional[GeocodedCoordinateCache] = None,
    age_range: Optional[AgeRange] = None,
) -> List[ProfileCandidate]:
    age_range = age_range or AgeRange()
    return filter_candidates(
        profiles,
        preferences,
        viewer,
        route_stops,
        geocoded_coords,
        predicate=lambda profile: age_range.contains(profile.age),
        matcher=DATING_MATCHER,
    )
