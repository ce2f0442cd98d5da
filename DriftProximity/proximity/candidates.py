"""Candidates - profiles and events that can be placed on a map."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from DriftProximity.utils.logger import logger
from DriftProximity.utils.geo_utils import Coordinate


class FallbackPolicy(Enum):
    """What the matcher answers when a candidate has no usable coordinate."""

    FAIL_OPEN = "fail_open"  # include
    FAIL_CLOSED = "fail_closed"  # exclude


@dataclass
class LocatableCandidate:
    """Entity tested for inclusion in a distance-filtered list."""

    id: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    fallback_policy: ClassVar[FallbackPolicy] = FallbackPolicy.FAIL_CLOSED

    @property
    def stored_coordinate(self) -> Optional[Coordinate]:
        """Stored coordinate, or None if missing, out of range or the -999 sentinel."""
        return Coordinate.from_lat_lon(self.latitude, self.longitude)

    @property
    def display_name(self) -> str:
        return str(self.id)


@dataclass
class ProfileCandidate(LocatableCandidate):
    """
    A person shown in dating or nearby-friends lists.

    Unresolved profiles are excluded: showing someone at an unverifiable
    distance would break the viewer's range.
    """

    name: Optional[str] = None
    age: Optional[int] = None
    interests: List[str] = field(default_factory=list)
    lifestyle: Optional[str] = None

    fallback_policy: ClassVar[FallbackPolicy] = FallbackPolicy.FAIL_CLOSED

    @property
    def display_name(self) -> str:
        return self.name or "?"


@dataclass
class EventCandidate(LocatableCandidate):
    """
    A community event.

    Unresolved events are included: events often have a TBD location.
    """

    title: Optional[str] = None
    category: Optional[str] = None

    fallback_policy: ClassVar[FallbackPolicy] = FallbackPolicy.FAIL_OPEN

    @property
    def display_name(self) -> str:
        return self.title or str(self.id)


def _parse_float(value: Any) -> Optional[float]:
    if value in (None, "", "null"):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _parse_int(value: Any) -> Optional[int]:
    if value in (None, "", "null"):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def parse_profile(raw: Dict[str, Any]) -> Optional[ProfileCandidate]:
    """
    Parse a raw profile payload into a ProfileCandidate.

    Expected fields:
    - id: str/UUID
    - latitude, longitude: float (optional, -999 = not set)
    - name: str (optional)
    - age: int (optional)
    - interests: list[str] (optional)
    - lifestyle: str (optional)
    """
    profile_id = raw.get("id")
    if profile_id in (None, ""):
        logger.debug(f"Missing profile id: {list(raw.keys())}")
        return None

    interests = raw.get("interests") or []
    if not isinstance(interests, (list, tuple)):
        logger.debug(f"Ignoring non-list interests for profile {profile_id}: {interests!r}")
        interests = []

    return ProfileCandidate(
        id=str(profile_id),
        latitude=_parse_float(raw.get("latitude")),
        longitude=_parse_float(raw.get("longitude")),
        name=raw.get("name"),
        age=_parse_int(raw.get("age")),
        interests=[str(i) for i in interests],
        lifestyle=raw.get("lifestyle"),
    )


def parse_event(raw: Dict[str, Any]) -> Optional[EventCandidate]:
    """Parse a raw community event payload (event_latitude/event_longitude) into an EventCandidate."""
    event_id = raw.get("id")
    if event_id in (None, ""):
        logger.debug(f"Missing event id: {list(raw.keys())}")
        return None

    return EventCandidate(
        id=str(event_id),
        latitude=_parse_float(raw.get("event_latitude", raw.get("latitude"))),
        longitude=_parse_float(raw.get("event_longitude", raw.get("longitude"))),
        title=raw.get("title"),
        category=raw.get("category"),
    )
