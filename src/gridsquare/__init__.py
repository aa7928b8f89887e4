"""gridsquare: British National Grid squares, grid references and geometry."""

from gridsquare.boundary import assemble_boundary, hull_boundary, order_ways
from gridsquare.exceptions import (
    GridReferenceInvalid,
    GridSquareError,
    InsufficientPoints,
    UnknownRegion,
)
from gridsquare.geometry import (
    buffer_polygon,
    convex_hull,
    distance_to_square_edge,
    haversine_km,
    is_point_in_polygon,
)
from gridsquare.gridref import format_grid_ref, parse_grid_ref, ten_km_grid_ref
from gridsquare.models import (
    GeoCoordinate,
    GridCoordinate,
    GridReference,
    SquareCorners,
)
from gridsquare.projection import grid_to_lat_lon, lat_lon_to_grid
from gridsquare.square import Square, random_square, square_corners

__all__ = [
    "Square",
    "GeoCoordinate",
    "GridCoordinate",
    "GridReference",
    "SquareCorners",
    "grid_to_lat_lon",
    "lat_lon_to_grid",
    "format_grid_ref",
    "parse_grid_ref",
    "ten_km_grid_ref",
    "haversine_km",
    "distance_to_square_edge",
    "is_point_in_polygon",
    "convex_hull",
    "buffer_polygon",
    "order_ways",
    "assemble_boundary",
    "hull_boundary",
    "random_square",
    "square_corners",
    "GridSquareError",
    "GridReferenceInvalid",
    "UnknownRegion",
    "InsufficientPoints",
]
