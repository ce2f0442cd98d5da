"""Feature filters: distance core AND each feature's own checks."""
from DriftProximity.filters.dating import AgeRange, filter_dating_profiles
from DriftProximity.filters.friends import filter_nearby_friends, shares_interest
from DriftProximity.filters.events import filter_events

__all__ = [
    "AgeRange",
    "filter_dating_profiles",
    "filter_nearby_friends",
    "shares_interest",
    "filter_events",
]
