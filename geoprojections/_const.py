"""
Constants declarations for geoprojections
"""

import sys

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_INV_F = 298.257223563  # Inverse flattening

# Radius of the PROJ "sphere" ellipsoid (meters)
SPHERE_RADIUS_METERS = 6_370_997.0

# Longitude and latitude bounds (half-open, upper bound excluded)
LON_RANGE = (-180.0, 180.0)
LAT_RANGE = (-90.0, 90.0)

# Tolerance for float comparisons of derived parameters
FLOAT_EPSILON = sys.float_info.epsilon
FLOAT_ULPS = 4

# Number of points processed per task by the batch helpers
DEFAULT_CHUNK_SIZE = 4096
