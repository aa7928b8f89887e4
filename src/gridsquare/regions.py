"""Preset regions for choosing grid squares.

The polygons are simplified outlines in grid metres. They stand in for the
full OSM administrative boundaries, which callers can fetch themselves
(relation ids are recorded) and pass through
:func:`gridsquare.boundary.assemble_boundary`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from gridsquare.constants import MAX_EASTING, MAX_NORTHING
from gridsquare.exceptions import UnknownRegion
from gridsquare.models import BoundingBox

GREATER_LONDON_POLYGON = (
    (505000, 200000), (510000, 199000), (515000, 198000), (520000, 197000),
    (525000, 196000), (530000, 196000), (535000, 196000), (540000, 196000),
    (545000, 195000), (550000, 194000), (555000, 192000), (558000, 189000),
    (560000, 185000), (561000, 180000), (560000, 175000), (558000, 170000),
    (555000, 166000), (552000, 163000), (548000, 160000), (544000, 158000),
    (540000, 157000), (535000, 156000), (530000, 156000), (525000, 155000),
    (520000, 155000), (515000, 156000), (510000, 157000), (507000, 160000),
    (505000, 164000), (504000, 168000), (503000, 172000), (503000, 176000),
    (503000, 180000), (503000, 184000), (504000, 188000), (504000, 192000),
    (505000, 196000), (505000, 200000),
)

# Roughly fare zones 1-2
CENTRAL_LONDON_POLYGON = (
    (525000, 185000), (528000, 184500), (531000, 184000), (533000, 183000),
    (535000, 181000), (535000, 179000), (535000, 177000), (534000, 175000),
    (532000, 175000), (530000, 175000), (528000, 175000), (526000, 176000),
    (525000, 177000), (525000, 179000), (525000, 181000), (525000, 183000),
    (525000, 185000),
)

# The Square Mile
CITY_OF_LONDON_POLYGON = (
    (532000, 181500), (533000, 181500), (533500, 181000), (533500, 180500),
    (533500, 180000), (533000, 180000), (532500, 180000), (532000, 180500),
    (532000, 181000), (532000, 181500),
)

UK_BOUNDS = BoundingBox(
    min_easting=0,
    max_easting=MAX_EASTING,
    min_northing=0,
    max_northing=MAX_NORTHING,
)

Boundary = Union[tuple[tuple[int, int], ...], BoundingBox]


@dataclass(frozen=True)
class Region:
    """A named area squares can be drawn from."""

    id: str
    name: str
    boundary: Boundary
    osm_relation_id: Optional[int] = None

    @property
    def is_polygon(self) -> bool:
        return not isinstance(self.boundary, BoundingBox)


REGIONS: dict[str, Region] = {
    r.id: r
    for r in (
        Region("central-london", "Central London (Zones 1-2)",
               CENTRAL_LONDON_POLYGON, 3045928),
        Region("city-of-london", "City of London", CITY_OF_LONDON_POLYGON),
        Region("greater-london", "Greater London",
               GREATER_LONDON_POLYGON, 175342),
        Region("united-kingdom", "United Kingdom", UK_BOUNDS, 62149),
    )
}

DEFAULT_REGION = "greater-london"


def get_region(region_id: str) -> Region:
    """
    Look up a preset region by id, e.g. 'greater-london'.

    Raises UnknownRegion if there is no such region.
    """
    try:
        return REGIONS[region_id.strip().lower()]
    except KeyError:
        raise UnknownRegion(region_id, sorted(REGIONS)) from None
