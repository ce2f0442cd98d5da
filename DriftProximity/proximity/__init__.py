"""Proximity filtering core."""
from DriftProximity.proximity.candidates import (
    EventCandidate,
    FallbackPolicy,
    LocatableCandidate,
    ProfileCandidate,
    parse_event,
    parse_profile,
)
from DriftProximity.proximity.geocode_cache import GeocodedCoordinateCache, build_geocode_cache
from DriftProximity.proximity.preferences import (
    FilterPreferences,
    InMemoryPreferencesStore,
    JsonFilePreferencesStore,
    PreferencesStore,
    default_preferences,
    preferences_store_for,
)
from DriftProximity.proximity.reference_points import build_reference_points
from DriftProximity.proximity.resolver import resolve_coordinate
from DriftProximity.proximity.matcher import (
    ProximityMatcher,
    filter_candidates,
    matches,
    matches_event,
    matches_profile,
)

__all__ = [
    "EventCandidate",
    "FallbackPolicy",
    "LocatableCandidate",
    "ProfileCandidate",
    "parse_event",
    "parse_profile",
    "GeocodedCoordinateCache",
    "build_geocode_cache",
    "FilterPreferences",
    "InMemoryPreferencesStore",
    "JsonFilePreferencesStore",
    "PreferencesStore",
    "default_preferences",
    "preferences_store_for",
    "build_reference_points",
    "resolve_coordinate",
    "ProximityMatcher",
    "filter_candidates",
    "matches",
    "matches_event",
    "matches_profile",
]
