"""Ellipsoid, projection and datum transformation constants."""

import math

# Airy 1830 ellipsoid (OSGB36)
AIRY_A = 6377563.396  # semi-major axis
AIRY_B = 6356256.909  # semi-minor axis
AIRY_E2 = 1 - (AIRY_B ** 2) / (AIRY_A ** 2)

# WGS84 ellipsoid
WGS84_A = 6378137.000
WGS84_B = 6356752.3142
WGS84_E2 = 1 - (WGS84_B ** 2) / (WGS84_A ** 2)

# National Grid projection
F0 = 0.9996012717  # scale factor on central meridian
PHI0 = math.radians(49.0)  # latitude of true origin
LAMBDA0 = math.radians(-2.0)  # longitude of true origin
N0 = -100000.0  # northing of true origin
E0 = 400000.0  # easting of true origin
N_AIRY = (AIRY_A - AIRY_B) / (AIRY_A + AIRY_B)

# Helmert parameters: OSGB36 -> WGS84. The reverse direction negates all seven.
HELMERT_TX = 446.448  # metres
HELMERT_TY = -125.157
HELMERT_TZ = 542.060
HELMERT_S = -20.4894  # ppm
HELMERT_RX = 0.1502  # arcseconds
HELMERT_RY = 0.2470
HELMERT_RZ = 0.8421

# Iteration control
FOOTPOINT_TOLERANCE_M = 0.001
FOOTPOINT_MAX_ITERATIONS = 100
GEODETIC_ITERATIONS = 10

# Extent of the grid in metres
MAX_EASTING = 700000
MAX_NORTHING = 1300000

EARTH_RADIUS_KM = 6371.0
KM_PER_DEGREE_LAT = 111.32

# Ways whose endpoints are closer than this (degrees, per axis) are joined
WAY_JOIN_TOLERANCE_DEG = 0.0001
