"""Shared test fixtures: squares, polygons and points around London."""

import pytest

from gridsquare.models import GeoCoordinate, SquareCorners


@pytest.fixture()
def london_square():
    """The 1km square TQ3080, just south of Trafalgar Square."""
    from gridsquare import Square

    return Square(530000, 180000)


@pytest.fixture()
def simple_corners() -> SquareCorners:
    """A small axis-aligned lat/lon box, easy to reason about by hand."""
    return SquareCorners(
        sw=GeoCoordinate(51.00, 0.00),
        ne=GeoCoordinate(51.01, 0.01),
        nw=GeoCoordinate(51.01, 0.00),
        se=GeoCoordinate(51.00, 0.01),
    )


@pytest.fixture()
def unit_square() -> list:
    return [(0, 0), (1, 0), (1, 1), (0, 1)]


@pytest.fixture()
def l_shape() -> list:
    """Concave polygon: a 2x2 square with the top-right quadrant removed."""
    return [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]


@pytest.fixture()
def station_points() -> list:
    """(lat, lon) of a handful of central London stations."""
    return [
        (51.5308, -0.1238),  # King's Cross
        (51.5031, -0.1132),  # Waterloo
        (51.4952, -0.1441),  # Victoria
        (51.5154, -0.1755),  # Paddington
        (51.5178, -0.0823),  # Liverpool Street
        (51.5079, -0.1247),  # Charing Cross (interior)
        (51.5142, -0.1494),  # Bond Street (interior)
    ]
