"""Reference point assembly - where distances are measured from."""
from __future__ import annotations

from typing import Iterable, List, Optional

from DriftProximity.utils.geo_utils import ReferencePoint


def build_reference_points(
    viewer: Optional[ReferencePoint],
    include_route_stops: bool,
    route_stops: Optional[Iterable[ReferencePoint]] = None,
) -> List[ReferencePoint]:
    """
    Viewer location first (if known), then every route stop when
    "along my route" is on. No dedup or pruning; the matcher stops at the
    first reference in range.

    An empty result means "nothing to measure against" and the matcher
    lets every candidate through.
    """
    points: List[ReferencePoint] = []
    if viewer is not None and viewer.is_valid:
        points.append(viewer)
    if include_route_stops and route_stops:
        points.extend(stop for stop in route_stops if stop is not None and stop.is_valid)
    return points
