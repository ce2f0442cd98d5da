"""Filter preferences and their persistence."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from DriftProximity.utils.logger import logger
import DriftProximity.config as AppConfig


@dataclass(frozen=True)
class FilterPreferences:
    """
    Distance filter settings for one filter pass.

    max_distance_miles is expected inside the slider domain; use clamped()
    or from_dict() at the boundary. A value at the slider max means
    "no distance limit".
    """

    max_distance_miles: int
    include_route_stops: bool

    @classmethod
    def clamped(cls, max_distance_miles: Any, include_route_stops: Any) -> FilterPreferences:
        miles = int(max_distance_miles)
        miles = max(AppConfig.distance_slider_min_miles, min(AppConfig.distance_slider_max_miles, miles))
        return cls(max_distance_miles=miles, include_route_stops=bool(include_route_stops))

    @property
    def is_unlimited_distance(self) -> bool:
        return self.max_distance_miles >= AppConfig.distance_slider_max_miles

    def has_active_filters(self, default: FilterPreferences) -> bool:
        """True when the user changed anything from the feature default."""
        return self != default

    def as_dict(self) -> Dict[str, Any]:
        return {
            "max_distance_miles": self.max_distance_miles,
            "include_route_stops": self.include_route_stops,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Optional[FilterPreferences]:
        """Decode a stored payload. Returns None if it is corrupt."""
        if not isinstance(raw, dict):
            return None
        try:
            miles = raw["max_distance_miles"]
            route = raw["include_route_stops"]
        except KeyError:
            return None
        if isinstance(miles, bool) or not isinstance(route, bool):
            return None
        try:
            return cls.clamped(miles, route)
        except (TypeError, ValueError, OverflowError):
            return None


def default_preferences(feature: str) -> FilterPreferences:
    """Default preferences for "dating", "friends" or "events"."""
    if feature not in AppConfig.FEATURES:
        raise ValueError(f"Unknown feature: {feature}")
    return FilterPreferences(
        max_distance_miles=AppConfig.default_max_distance_miles,
        include_route_stops=AppConfig.include_route_stops_defaults[feature],
    )


class PreferencesStore(Protocol):
    """Load/save interface injected into whatever owns the filter UI."""

    def load(self) -> FilterPreferences: ...

    def save(self, preferences: FilterPreferences) -> None: ...


class InMemoryPreferencesStore:
    """Keeps preferences for the lifetime of the process."""

    def __init__(self, default: FilterPreferences) -> None:
        self._default = default
        self._value: Optional[FilterPreferences] = None

    def load(self) -> FilterPreferences:
        return self._value if self._value is not None else self._default

    def save(self, preferences: FilterPreferences) -> None:
        self._value = preferences


class JsonFilePreferencesStore:
    """
    Preferences stored under a key inside a single JSON file.

    Other keys in the same file are preserved on save. Absent or corrupt
    data loads the default; save failures are logged, never raised.
    """

    def __init__(self, path: str, key: str, default: FilterPreferences) -> None:
        self.path = path
        self.key = key
        self._default = default

    def _read_all(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"⚠️ Could not read preferences from {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"⚠️ Preferences file {self.path} is not a JSON object, ignoring")
            return {}
        return data

    def load(self) -> FilterPreferences:
        raw = self._read_all().get(self.key)
        if raw is None:
            return self._default
        preferences = FilterPreferences.from_dict(raw)
        if preferences is None:
            logger.warning(f"⚠️ Corrupt preferences under '{self.key}' in {self.path}. Using default.")
            return self._default
        return preferences

    def save(self, preferences: FilterPreferences) -> None:
        data = self._read_all()
        data[self.key] = preferences.as_dict()
        try:
            Path(os.path.dirname(self.path) or ".").mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error(f"❌ Failed to save preferences '{self.key}' to {self.path}: {e}")
            return
        logger.debug(f"Saved preferences '{self.key}': {preferences.as_dict()}")


def preferences_store_for(feature: str, path: Optional[str] = None) -> JsonFilePreferencesStore:
    """File-backed store for a feature, keyed like the app's storage keys."""
    return JsonFilePreferencesStore(
        path=path or AppConfig.preferences_path,
        key=f"{feature}FilterPreferences",
        default=default_preferences(feature),
    )
