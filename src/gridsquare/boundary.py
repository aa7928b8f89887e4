"""Assembly of OSM multipolygon outer ways into a single boundary."""

from __future__ import annotations

import logging
from typing import Sequence

from gridsquare.constants import WAY_JOIN_TOLERANCE_DEG
from gridsquare.exceptions import InsufficientPoints
from gridsquare.geometry import buffer_polygon, convex_hull, dedupe_consecutive
from gridsquare.projection import lat_lon_to_grid

logger = logging.getLogger(__name__)

LatLon = tuple[float, float]


def _touches(a: Sequence[float], b: Sequence[float], tolerance: float) -> bool:
    return abs(a[0] - b[0]) < tolerance and abs(a[1] - b[1]) < tolerance


def order_ways(
    ways: Sequence[Sequence[Sequence[float]]],
    tolerance: float = WAY_JOIN_TOLERANCE_DEG,
) -> list[list[LatLon]]:
    """
    Order and orient way chains so each one starts where the previous ended.

    Greedy: starting from the first way, repeatedly pick the first
    remaining way whose start (kept as-is) or end (reversed) lies within
    *tolerance* degrees of the current tail. When nothing connects, the
    next remaining way is appended anyway and a warning is logged, so the
    result is always complete even if the outline has gaps. Inputs made
    of several separate rings, or with branch points, are not untangled.
    """
    remaining = [[tuple(p) for p in way] for way in ways if len(way) > 0]
    if not remaining:
        return []

    ordered = [remaining.pop(0)]
    gaps = 0

    while remaining:
        tail = ordered[-1][-1]
        for i, way in enumerate(remaining):
            if _touches(way[0], tail, tolerance):
                ordered.append(remaining.pop(i))
                break
            if _touches(way[-1], tail, tolerance):
                ordered.append(remaining.pop(i)[::-1])
                break
        else:
            gaps += 1
            logger.warning(
                "No way connects to (%.6f, %.6f); appending next way "
                "unjoined (%d left)",
                tail[0], tail[1], len(remaining) - 1,
            )
            ordered.append(remaining.pop(0))

    if gaps:
        logger.warning("Assembled %d ways with %d gap(s)", len(ordered), gaps)
    return ordered


def assemble_boundary(
    ways: Sequence[Sequence[Sequence[float]]],
) -> list[tuple[float, float]]:
    """
    Turn the outer ways of a relation into one grid-coordinate outline.

    Ways are (lat, lon) chains in WGS84 degrees. The result is a list of
    (easting, northing) pairs with consecutive duplicates removed.
    """
    ordered = order_ways(ways) if len(ways) > 1 else [list(w) for w in ways]

    boundary = []
    for way in ordered:
        for lat, lon in way:
            grid = lat_lon_to_grid(lat, lon)
            boundary.append((grid.easting, grid.northing))

    outline = dedupe_consecutive(boundary)
    logger.debug(
        "Assembled %d ways into %d boundary points", len(ordered), len(outline)
    )
    return outline


def hull_boundary(
    points: Sequence[Sequence[float]], buffer_m: float = 500
) -> list[tuple[int, int]]:
    """
    Build a region outline around a cloud of (lat, lon) points.

    Used to derive a boundary from station positions: the points are
    projected to the grid, wrapped in a convex hull and buffered outward.

    Raises InsufficientPoints if fewer than three points are given.
    """
    if len(points) < 3:
        raise InsufficientPoints(len(points))

    grid_points = []
    for lat, lon in points:
        grid = lat_lon_to_grid(lat, lon)
        grid_points.append((grid.easting, grid.northing))

    hull = convex_hull(grid_points)
    logger.debug("Convex hull of %d points has %d vertices", len(points), len(hull))
    return buffer_polygon(hull, buffer_m)
