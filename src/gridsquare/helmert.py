"""Helmert 7-parameter datum transformation between OSGB36 and WGS84.

Both directions work in radians. The WGS84 -> OSGB36 direction uses the
negated parameter set rather than a true inverse; the two stay consistent
to a few millimetres, well inside what the grid needs.
"""

import math

from gridsquare.constants import (
    AIRY_A,
    AIRY_E2,
    GEODETIC_ITERATIONS,
    HELMERT_RX,
    HELMERT_RY,
    HELMERT_RZ,
    HELMERT_S,
    HELMERT_TX,
    HELMERT_TY,
    HELMERT_TZ,
    WGS84_A,
    WGS84_E2,
)

_ARCSEC = math.pi / 648000


def _to_cartesian(lat, lon, a, e2):
    """Geodetic (height 0) -> geocentric x, y, z."""
    sin_lat = math.sin(lat)
    cos_lat = math.cos(lat)
    nu = a / math.sqrt(1 - e2 * sin_lat ** 2)

    x = nu * cos_lat * math.cos(lon)
    y = nu * cos_lat * math.sin(lon)
    z = nu * (1 - e2) * sin_lat
    return x, y, z


def _to_geodetic(x, y, z, a, e2):
    """Geocentric x, y, z -> geodetic (lat, lon) with a fixed number of refinements."""
    p = math.sqrt(x ** 2 + y ** 2)
    lat = math.atan2(z, p * (1 - e2))

    for _ in range(GEODETIC_ITERATIONS):
        sin_lat = math.sin(lat)
        nu = a / math.sqrt(1 - e2 * sin_lat ** 2)
        lat = math.atan2(z + e2 * nu * sin_lat, p)

    return lat, math.atan2(y, x)


def _helmert(x, y, z, sign):
    """Apply the similarity transform; sign=-1 gives the reverse direction."""
    tx, ty, tz = sign * HELMERT_TX, sign * HELMERT_TY, sign * HELMERT_TZ
    sc = 1 + sign * HELMERT_S * 1e-6
    rx = sign * HELMERT_RX * _ARCSEC
    ry = sign * HELMERT_RY * _ARCSEC
    rz = sign * HELMERT_RZ * _ARCSEC

    x2 = tx + sc * x - rz * y + ry * z
    y2 = ty + rz * x + sc * y - rx * z
    z2 = tz - ry * x + rx * y + sc * z
    return x2, y2, z2


def osgb36_to_wgs84(lat: float, lon: float) -> tuple[float, float]:
    """Convert an OSGB36 (lat, lon) in radians to WGS84 (lat, lon) in radians."""
    x, y, z = _to_cartesian(lat, lon, AIRY_A, AIRY_E2)
    x2, y2, z2 = _helmert(x, y, z, 1)
    return _to_geodetic(x2, y2, z2, WGS84_A, WGS84_E2)


def wgs84_to_osgb36(lat: float, lon: float) -> tuple[float, float]:
    """Convert a WGS84 (lat, lon) in radians to OSGB36 (lat, lon) in radians."""
    x, y, z = _to_cartesian(lat, lon, WGS84_A, WGS84_E2)
    x2, y2, z2 = _helmert(x, y, z, -1)
    return _to_geodetic(x2, y2, z2, AIRY_A, AIRY_E2)
