"""Distance and polygon helpers.

Distances work on WGS84 lat/lon in degrees and return kilometres. Polygon
functions work on planar (easting, northing) pairs in metres.
"""

from __future__ import annotations

import math
from typing import Sequence

from gridsquare.constants import EARTH_RADIUS_KM
from gridsquare.models import GeoCoordinate

Point = tuple[float, float]


# ── Distances ─────────────────────────────────────────────────


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres on a sphere of radius 6371km."""
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.sin(dlon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_to_segment(
    lat: float, lon: float,
    lat1: float, lon1: float,
    lat2: float, lon2: float,
) -> float:
    """
    Distance in kilometres from a point to the segment (lat1, lon1)-(lat2, lon2).

    The nearest point is found by treating lon/lat as flat x/y, which is
    only reasonable over a few tens of kilometres; the distance to that
    point is then measured with haversine.
    """
    dx = lon2 - lon1
    dy = lat2 - lat1
    len_sq = dx * dx + dy * dy

    if len_sq == 0:
        t = 0.0
    else:
        t = ((lon - lon1) * dx + (lat - lat1) * dy) / len_sq
        t = max(0.0, min(1.0, t))

    return haversine_km(lat, lon, lat1 + t * dy, lon1 + t * dx)


def distance_to_square_edge(
    lat: float,
    lon: float,
    sw: GeoCoordinate,
    ne: GeoCoordinate,
    nw: GeoCoordinate,
    se: GeoCoordinate,
) -> float:
    """
    Distance in kilometres from a point to the nearest edge of a square.

    Returns exactly 0.0 when the point lies within the lat/lon box spanned
    by the south-west and north-east corners.
    """
    inside = (
        min(sw.lat, ne.lat) <= lat <= max(sw.lat, ne.lat)
        and min(sw.lon, ne.lon) <= lon <= max(sw.lon, ne.lon)
    )
    if inside:
        return 0.0

    return min(
        distance_to_segment(lat, lon, sw.lat, sw.lon, se.lat, se.lon),
        distance_to_segment(lat, lon, nw.lat, nw.lon, ne.lat, ne.lon),
        distance_to_segment(lat, lon, sw.lat, sw.lon, nw.lat, nw.lon),
        distance_to_segment(lat, lon, se.lat, se.lon, ne.lat, ne.lon),
    )


# ── Polygons ──────────────────────────────────────────────────


def is_point_in_polygon(
    easting: float, northing: float, polygon: Sequence[Sequence[float]]
) -> bool:
    """
    Even-odd ray casting test. Points exactly on an edge may go either way.

    Polygons with fewer than three vertices contain nothing.
    """
    if len(polygon) < 3:
        return False

    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i][0], polygon[i][1]
        xj, yj = polygon[j][0], polygon[j][1]
        if (yi > northing) != (yj > northing) and (
            easting < (xj - xi) * (northing - yi) / (yj - yi) + xi
        ):
            inside = not inside
        j = i
    return inside


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def convex_hull(points: Sequence[Sequence[float]]) -> list[Point]:
    """
    Convex hull by monotone chain, returned counter-clockwise as a closed ring.

    Collinear points are dropped. Fewer than three points come back
    unchanged, in a new list.
    """
    if len(points) < 3:
        return list(points)

    ordered = sorted(tuple(p) for p in points)

    lower: list[Point] = []
    for p in ordered:
        while len(lower) >= 2 and _cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: list[Point] = []
    for p in reversed(ordered):
        while len(upper) >= 2 and _cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    # Each chain ends where the other begins
    hull = lower[:-1] + upper[:-1]
    if hull and hull[0] != hull[-1]:
        hull.append(hull[0])
    return hull


def _signed_area(ring: Sequence[Point]) -> float:
    area = 0.0
    for i in range(len(ring)):
        x1, y1 = ring[i]
        x2, y2 = ring[(i + 1) % len(ring)]
        area += x1 * y2 - x2 * y1
    return area / 2


def _unit(dx: float, dy: float) -> Point:
    length = math.hypot(dx, dy)
    if length > 0:
        return dx / length, dy / length
    return dx, dy


def buffer_polygon(
    polygon: Sequence[Sequence[float]], buffer_m: float
) -> list[tuple[int, int]]:
    """
    Push each vertex of *polygon* outward by *buffer_m* metres.

    Each vertex moves along the average of its two edge directions, turned
    to face away from the interior; a negative distance shrinks instead.
    This is not a true Minkowski buffer. Concave or spiky input can come
    back self-intersecting, so keep it to roughly convex outlines such as
    the output of :func:`convex_hull`.

    Returns a closed ring rounded to whole metres.
    """
    ring = [tuple(p) for p in polygon]
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()
    if not ring:
        return []

    # Left-hand normals point inward on a counter-clockwise ring
    side = -1 if _signed_area(ring) > 0 else 1

    buffered = []
    count = len(ring)
    for i, (x, y) in enumerate(ring):
        px, py = ring[i - 1]
        nx, ny = ring[(i + 1) % count]

        t1 = _unit(x - px, y - py)
        t2 = _unit(nx - x, ny - y)
        normal = _unit(
            -(t1[1] + t2[1]) / 2 * side,
            (t1[0] + t2[0]) / 2 * side,
        )

        buffered.append(
            (round(x + normal[0] * buffer_m), round(y + normal[1] * buffer_m))
        )

    buffered.append(buffered[0])
    return buffered


# ── Point sequences ───────────────────────────────────────────


def centroid(points: Sequence[Sequence[float]]) -> Point:
    """Arithmetic mean of a non-empty sequence of pairs."""
    if not points:
        raise ValueError("centroid of an empty sequence")
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return sum(xs) / len(xs), sum(ys) / len(ys)


def dedupe_consecutive(points: Sequence[Sequence[float]]) -> list[Point]:
    """Drop any point identical to the one before it."""
    result: list[Point] = []
    for p in points:
        p = tuple(p)
        if not result or result[-1] != p:
            result.append(p)
    return result
