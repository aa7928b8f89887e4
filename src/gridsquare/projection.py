"""British National Grid <-> WGS84 conversion.

Transverse Mercator on the Airy 1830 ellipsoid, following the series in
the Ordnance Survey's "A guide to coordinate systems in Great Britain",
combined with the Helmert transform in :mod:`gridsquare.helmert`.

No input validation is done: any finite easting/northing or lat/lon gives
a deterministic result, however implausible outside Great Britain.
"""

import math

from gridsquare.constants import (
    AIRY_A,
    AIRY_B,
    AIRY_E2,
    E0,
    F0,
    FOOTPOINT_MAX_ITERATIONS,
    FOOTPOINT_TOLERANCE_M,
    LAMBDA0,
    N0,
    N_AIRY,
    PHI0,
)
from gridsquare.helmert import osgb36_to_wgs84, wgs84_to_osgb36
from gridsquare.models import GeoCoordinate, GridCoordinate


def meridional_arc(phi: float) -> float:
    """Meridional arc distance (metres, scaled by F0) from the true origin to *phi*."""
    n = N_AIRY
    n2 = n * n
    n3 = n2 * n

    dphi = phi - PHI0
    sphi = phi + PHI0

    ma = (1 + n + (5.0 / 4.0) * n2 + (5.0 / 4.0) * n3) * dphi
    mb = (3 * n + 3 * n2 + (21.0 / 8.0) * n3) * math.sin(dphi) * math.cos(sphi)
    mc = ((15.0 / 8.0) * n2 + (15.0 / 8.0) * n3) * math.sin(2 * dphi) * math.cos(2 * sphi)
    md = (35.0 / 24.0) * n3 * math.sin(3 * dphi) * math.cos(3 * sphi)

    return AIRY_B * F0 * (ma - mb + mc - md)


def _radii(phi):
    """Return (nu, rho, eta2) at latitude *phi* on the Airy ellipsoid."""
    s2 = math.sin(phi) ** 2
    nu = AIRY_A * F0 / math.sqrt(1 - AIRY_E2 * s2)
    rho = AIRY_A * F0 * (1 - AIRY_E2) / (1 - AIRY_E2 * s2) ** 1.5
    return nu, rho, nu / rho - 1


def _footpoint_latitude(northing):
    phi = PHI0
    m = 0.0
    for _ in range(FOOTPOINT_MAX_ITERATIONS):
        phi = (northing - N0 - m) / (AIRY_A * F0) + phi
        m = meridional_arc(phi)
        if abs(northing - N0 - m) < FOOTPOINT_TOLERANCE_M:
            break
    return phi


def grid_to_osgb36(easting: float, northing: float) -> tuple[float, float]:
    """Convert easting/northing to OSGB36 (lat, lon) in radians."""
    phi = _footpoint_latitude(northing)

    cos_phi = math.cos(phi)
    tan_phi = math.tan(phi)
    tan2 = tan_phi ** 2
    tan4 = tan2 * tan2
    tan6 = tan4 * tan2
    sec_phi = 1 / cos_phi

    nu, rho, eta2 = _radii(phi)
    nu3 = nu ** 3
    nu5 = nu ** 5
    nu7 = nu ** 7

    VII = tan_phi / (2 * rho * nu)
    VIII = tan_phi / (24 * rho * nu3) * (5 + 3 * tan2 + eta2 - 9 * tan2 * eta2)
    IX = tan_phi / (720 * rho * nu5) * (61 + 90 * tan2 + 45 * tan4)
    X = sec_phi / nu
    XI = sec_phi / (6 * nu3) * (nu / rho + 2 * tan2)
    XII = sec_phi / (120 * nu5) * (5 + 28 * tan2 + 24 * tan4)
    XIIA = sec_phi / (5040 * nu7) * (61 + 662 * tan2 + 1320 * tan4 + 720 * tan6)

    de = easting - E0

    lat = phi - VII * de ** 2 + VIII * de ** 4 - IX * de ** 6
    lon = LAMBDA0 + X * de - XI * de ** 3 + XII * de ** 5 - XIIA * de ** 7
    return lat, lon


def osgb36_to_grid(lat: float, lon: float) -> tuple[float, float]:
    """Project an OSGB36 (lat, lon) in radians to unrounded (easting, northing)."""
    sin_lat = math.sin(lat)
    cos_lat = math.cos(lat)
    tan2 = math.tan(lat) ** 2
    tan4 = tan2 * tan2

    nu, rho, eta2 = _radii(lat)
    m = meridional_arc(lat)

    I = m + N0
    II = (nu / 2) * sin_lat * cos_lat
    III = (nu / 24) * sin_lat * cos_lat ** 3 * (5 - tan2 + 9 * eta2)
    IIIA = (nu / 720) * sin_lat * cos_lat ** 5 * (61 - 58 * tan2 + tan4)
    IV = nu * cos_lat
    V = (nu / 6) * cos_lat ** 3 * (nu / rho - tan2)
    VI = (nu / 120) * cos_lat ** 5 * (
        5 - 18 * tan2 + tan4 + 14 * eta2 - 58 * tan2 * eta2
    )

    dl = lon - LAMBDA0

    northing = I + II * dl ** 2 + III * dl ** 4 + IIIA * dl ** 6
    easting = E0 + IV * dl + V * dl ** 3 + VI * dl ** 5
    return easting, northing


def grid_to_lat_lon(easting: float, northing: float) -> GeoCoordinate:
    """
    Convert British National Grid easting/northing to WGS84.

    Args:
        easting: BNG easting in metres
        northing: BNG northing in metres

    Returns:
        GeoCoordinate in decimal degrees (WGS84).
    """
    lat_osgb, lon_osgb = grid_to_osgb36(easting, northing)
    lat, lon = osgb36_to_wgs84(lat_osgb, lon_osgb)
    return GeoCoordinate(lat=math.degrees(lat), lon=math.degrees(lon))


def lat_lon_to_grid(lat: float, lon: float) -> GridCoordinate:
    """
    Convert WGS84 latitude/longitude in degrees to British National Grid.

    Both outputs are rounded to the nearest whole metre.
    """
    lat_osgb, lon_osgb = wgs84_to_osgb36(math.radians(lat), math.radians(lon))
    easting, northing = osgb36_to_grid(lat_osgb, lon_osgb)
    return GridCoordinate(easting=round(easting), northing=round(northing))
