"""Utilities package."""
from DriftProximity.utils.logger import logger, setup_logging
from DriftProximity.utils.geo_utils import (
    Coordinate,
    ReferencePoint,
    distance_miles_rounded,
    haversine_miles,
    is_valid,
    is_within_distance,
)

__all__ = [
    "logger",
    "setup_logging",
    "Coordinate",
    "ReferencePoint",
    "distance_miles_rounded",
    "haversine_miles",
    "is_valid",
    "is_within_distance",
]
