"""Grid squares and how points relate to them."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from gridsquare import gridref
from gridsquare.constants import KM_PER_DEGREE_LAT
from gridsquare.geometry import distance_to_square_edge, is_point_in_polygon
from gridsquare.models import (
    BoundingBox,
    GeoCoordinate,
    GridCoordinate,
    Placement,
    SearchBounds,
    SquareCorners,
)
from gridsquare.projection import grid_to_lat_lon, lat_lon_to_grid
from gridsquare.regions import GREATER_LONDON_POLYGON

logger = logging.getLogger(__name__)

_DEFAULT_SIZE = 1000
_DEFAULT_SEARCH_BUFFER_KM = 2.0


def square_corners(
    easting: float, northing: float, size: float = _DEFAULT_SIZE
) -> SquareCorners:
    """WGS84 corners of the square whose south-west corner is (easting, northing)."""
    return SquareCorners(
        sw=grid_to_lat_lon(easting, northing),
        ne=grid_to_lat_lon(easting + size, northing + size),
        nw=grid_to_lat_lon(easting, northing + size),
        se=grid_to_lat_lon(easting + size, northing),
    )


def search_bounds(
    easting: float,
    northing: float,
    size: float = _DEFAULT_SIZE,
    buffer_km: float = _DEFAULT_SEARCH_BUFFER_KM,
) -> SearchBounds:
    """
    Lat/lon box covering a square plus *buffer_km* on every side.

    Suitable as the bounding box of a nearby-features query.
    """
    sw = grid_to_lat_lon(easting, northing)
    ne = grid_to_lat_lon(easting + size, northing + size)

    centre_lat = (sw.lat + ne.lat) / 2
    lat_buffer = buffer_km / KM_PER_DEGREE_LAT
    lon_buffer = buffer_km / (KM_PER_DEGREE_LAT * math.cos(math.radians(centre_lat)))

    return SearchBounds(
        south=min(sw.lat, ne.lat) - lat_buffer,
        west=min(sw.lon, ne.lon) - lon_buffer,
        north=max(sw.lat, ne.lat) + lat_buffer,
        east=max(sw.lon, ne.lon) + lon_buffer,
        sw=sw,
        ne=ne,
    )


def snap_to_grid(
    easting: float, northing: float, size: int = _DEFAULT_SIZE
) -> GridCoordinate:
    """South-west corner of the *size* metre square containing the point."""
    return GridCoordinate(
        easting=math.floor(easting / size) * size,
        northing=math.floor(northing / size) * size,
    )


def _pick(rng: random.Random, low: float, high: float, size: int) -> int:
    return math.floor((low + rng.random() * (high - low)) / size) * size


def random_square(
    boundary: Union[Sequence[Sequence[float]], BoundingBox, None] = None,
    rng: Optional[random.Random] = None,
    size: int = _DEFAULT_SIZE,
    max_attempts: int = 1000,
) -> GridCoordinate:
    """
    Pick a random grid square inside *boundary*.

    *boundary* is either a BoundingBox or a polygon of (easting, northing)
    pairs; it defaults to Greater London. For a polygon, squares are drawn
    from its bounding box until one has its centre inside. If none is found
    after *max_attempts*, the square at the middle of the bounding box is
    returned and a warning is logged.
    """
    if boundary is None:
        boundary = GREATER_LONDON_POLYGON
    if rng is None:
        rng = random.Random()

    if isinstance(boundary, BoundingBox):
        return GridCoordinate(
            easting=_pick(rng, boundary.min_easting, boundary.max_easting, size),
            northing=_pick(rng, boundary.min_northing, boundary.max_northing, size),
        )

    min_e = min(p[0] for p in boundary)
    max_e = max(p[0] for p in boundary)
    min_n = min(p[1] for p in boundary)
    max_n = max(p[1] for p in boundary)

    for attempt in range(1, max_attempts + 1):
        easting = _pick(rng, min_e, max_e, size)
        northing = _pick(rng, min_n, max_n, size)
        if is_point_in_polygon(easting + size / 2, northing + size / 2, boundary):
            logger.debug(
                "Random square E=%d N=%d found after %d attempt(s)",
                easting, northing, attempt,
            )
            return GridCoordinate(easting=easting, northing=northing)

    fallback = snap_to_grid((min_e + max_e) / 2, (min_n + max_n) / 2, size)
    logger.warning(
        "No square inside boundary after %d attempts; using E=%d N=%d",
        max_attempts, fallback.easting, fallback.northing,
    )
    return fallback


def rank_points(
    points: Iterable[Sequence[float]], corners: SquareCorners
) -> list[Placement]:
    """
    Measure each (lat, lon) against a square and sort the results.

    Points inside the square come first, the rest by ascending distance
    to the nearest edge. ``Placement.index`` refers back to *points*.
    """
    placements = []
    for index, (lat, lon) in enumerate(points):
        distance = distance_to_square_edge(
            lat, lon, corners.sw, corners.ne, corners.nw, corners.se
        )
        placements.append(
            Placement(
                index=index,
                lat=lat,
                lon=lon,
                distance_km=distance,
                inside=distance == 0,
            )
        )
    placements.sort(key=lambda p: (not p.inside, p.distance_km))
    return placements


def format_distance(distance_km: float) -> str:
    """Human-readable distance: metres below 1km, otherwise km to one decimal."""
    if distance_km < 1:
        return f"{math.floor(distance_km * 1000 + 0.5)} m"
    return f"{distance_km:.1f} km"


# Square size in metres -> digits in its grid reference
_GRID_REF_DIGITS = {10000: 2, 1000: 4, 100: 6, 10: 8, 1: 10}


@dataclass(frozen=True)
class Square:
    """
    A square on the British National Grid, anchored at its south-west corner.

    Build one from a grid reference (the reference's precision becomes the
    square size, so 'TQ3080' is 1km and 'TQ38' is 10km), from a WGS84
    point, or directly from easting/northing. The size must be one a grid
    reference can name: 1, 10, 100, 1000 or 10000 metres.
    """

    easting: int
    northing: int
    size: int = _DEFAULT_SIZE

    def __post_init__(self):
        if self.size not in _GRID_REF_DIGITS:
            raise ValueError(
                f"Square size must be one of {sorted(_GRID_REF_DIGITS)} metres, "
                f"got {self.size}"
            )

    # ── Constructors ──────────────────────────────────────────────

    @classmethod
    def from_grid_ref(cls, raw: str) -> Square:
        """
        Square named by *raw*, e.g. 'TQ 30 80'.

        Raises GridReferenceInvalid if *raw* is not a valid grid reference.
        """
        ref = gridref.normalise(raw)
        return cls(ref.easting, ref.northing, ref.precision_m)

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float, size: int = _DEFAULT_SIZE) -> Square:
        """Square of *size* metres containing the WGS84 point."""
        grid = lat_lon_to_grid(lat, lon)
        snapped = snap_to_grid(grid.easting, grid.northing, size)
        return cls(snapped.easting, snapped.northing, size)

    # ── Public API ────────────────────────────────────────────────

    @property
    def grid_ref(self) -> str:
        return gridref.format_grid_ref(
            self.easting, self.northing, _GRID_REF_DIGITS[self.size]
        )

    @property
    def ten_km_ref(self) -> str:
        return gridref.ten_km_grid_ref(self.grid_ref)

    @property
    def centre(self) -> GridCoordinate:
        half = self.size / 2
        return GridCoordinate(self.easting + half, self.northing + half)

    def centre_lat_lon(self) -> GeoCoordinate:
        centre = self.centre
        return grid_to_lat_lon(centre.easting, centre.northing)

    def corners(self) -> SquareCorners:
        return square_corners(self.easting, self.northing, self.size)

    def search_bounds(self, buffer_km: float = _DEFAULT_SEARCH_BUFFER_KM) -> SearchBounds:
        return search_bounds(self.easting, self.northing, self.size, buffer_km)

    def distance_to(self, lat: float, lon: float) -> float:
        """Kilometres from a WGS84 point to the nearest edge; 0.0 inside."""
        c = self.corners()
        return distance_to_square_edge(lat, lon, c.sw, c.ne, c.nw, c.se)

    def contains(self, lat: float, lon: float) -> bool:
        return self.distance_to(lat, lon) == 0

    def rank(self, points: Iterable[Sequence[float]]) -> list[Placement]:
        """Rank (lat, lon) points by distance to this square; see rank_points."""
        return rank_points(points, self.corners())

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "easting": self.easting,
            "northing": self.northing,
            "size": self.size,
            "grid_ref": self.grid_ref,
            "ten_km_ref": self.ten_km_ref,
            "corners": self.corners().to_dict(),
        }
