import numpy as np
import pytest
from pytest import approx

from geoprojections.ellipsoids import GRS80, SPHERE, WGS60, WGS66, WGS72, WGS84

# (lon, lat) pairs spread over the globe, one per quadrant and hemisphere
GLOBAL_GEO_POINTS = [
    (45.0, 45.0), (-45.0, 45.0), (45.0, -45.0), (-45.0, -45.0),
    (135.0, 45.0), (-135.0, 45.0), (135.0, -45.0), (-135.0, -45.0),
]

# (lon, lat) pairs within a few degrees of (30, 30)
LOCAL_GEO_POINTS = [
    (31.48, 31.26), (28.51, 31.26), (31.44, 28.72), (28.55, 28.72),
    (33.00, 32.50), (26.99, 32.50), (27.14, 27.42), (32.85, 27.42),
]

# (x, y) map coordinates within a few hundred kilometers of the origin
MAP_POINTS = [
    (100_000.0, 100_000.0), (-100_000.0, 100_000.0),
    (100_000.0, -100_000.0), (-100_000.0, -100_000.0),
    (200_000.0, 200_000.0), (-200_000.0, 200_000.0),
    (200_000.0, -200_000.0), (-200_000.0, -200_000.0),
]

PROJ_ELLIPSOIDS = [
    (WGS84, "WGS84"), (WGS72, "WGS72"), (WGS66, "WGS66"),
    (WGS60, "WGS60"), (GRS80, "GRS80"), (SPHERE, "sphere"),
]


def assert_pairs_equal(p1, p2, abs_tol=1e-7):
    """
    Asserts that two coordinate pairs are equal within a specified absolute tolerance.

    Args:
        p1: The first (x, y) or (lon, lat) pair
        p2: The second pair
        abs_tol: The absolute tolerance for floating point comparison.
    """
    try:
        assert p1[0] == approx(p2[0], abs=abs_tol)
        assert p1[1] == approx(p2[1], abs=abs_tol)
    except AssertionError as e:
        print(p1)
        print(p2)
        raise e


def assert_round_trip(projection, points, abs_tol=1e-6):
    """
    Asserts that inverse projecting a projected point recovers the original point,
    for scalars and for the points as a single array.
    """
    for lon, lat in points:
        x, y = projection.project(lon, lat)
        assert_pairs_equal(projection.inverse_project(x, y), (lon, lat), abs_tol)

    lons, lats = np.array(points).T
    xs, ys = projection.project(lons, lats)
    rt_lons, rt_lats = projection.inverse_project(xs, ys)
    np.testing.assert_allclose(rt_lons, lons, atol=abs_tol)
    np.testing.assert_allclose(rt_lats, lats, atol=abs_tol)


def assert_matches_proj(projection, proj_str, geo_points, map_points, abs_tol=1e-3, deg_tol=1e-7):
    """
    Asserts that a projection agrees with PROJ (through pyproj) for the given
    forward and inverse test points.
    """
    pyproj = pytest.importorskip('pyproj')
    ref_proj = pyproj.Proj(proj_str)

    for lon, lat in geo_points:
        assert_pairs_equal(projection.project(lon, lat), ref_proj(lon, lat), abs_tol)

    for x, y in map_points:
        assert_pairs_equal(
            projection.inverse_project(x, y), ref_proj(x, y, inverse=True), deg_tol
        )
