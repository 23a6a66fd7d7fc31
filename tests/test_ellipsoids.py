import math

import pytest
from geographiclib.geodesic import Geodesic
from pydantic import ValidationError
from pytest import approx

from geoprojections.ellipsoids import *
from geoprojections.errors import IncorrectParams, ParamNotFinite

NAMED_ELLIPSOIDS = [
    WGS84, GRS80, WGS72, WGS66, WGS60, GRS67, AIRY1830, CLARKE1866, SPHERE
]


def test_ellipsoid_invariants():
    for ellps in NAMED_ELLIPSOIDS:
        assert ellps.A > 0
        assert 0 < ellps.B <= ellps.A
        assert 0 <= ellps.E < 1
        assert 0 <= ellps.F < 1
        assert ellps.B == approx(ellps.A * (1 - ellps.F), rel=1e-12)
        assert ellps.E ** 2 == approx(2 * ellps.F - ellps.F ** 2, abs=1e-12)


def test_ellipsoid_wgs84():
    assert WGS84.A == 6378137.0
    assert WGS84.F == approx(1 / 298.257223563)
    assert WGS84.B == approx(6356752.314245, abs=1e-6)
    assert WGS84.E == approx(0.0818191908426, abs=1e-12)


def test_ellipsoid_sphere():
    assert SPHERE.A == SPHERE.B == 6370997.0
    assert SPHERE.E == 0.0
    assert SPHERE.F == 0.0

    sphere = Ellipsoid.sphere(1000.0)
    assert sphere.to_tuple() == (1000.0, 1000.0, 0.0, 0.0)

    with pytest.raises(IncorrectParams):
        Ellipsoid.sphere(0.0)

    with pytest.raises(ParamNotFinite):
        Ellipsoid.sphere(math.inf)


def test_ellipsoid_class_constants():
    assert Ellipsoid.WGS84 is WGS84
    assert Ellipsoid.CLARKE1866 is CLARKE1866
    assert Ellipsoid.SPHERE is SPHERE


def test_ellipsoid_new():
    ellps = Ellipsoid.new(6_378_206.4, 294.978_698_2)
    assert ellps == CLARKE1866
    assert ellps.B == approx(6356583.8, abs=0.01)

    with pytest.raises(IncorrectParams):
        Ellipsoid.new(0.0, 298.0)

    with pytest.raises(IncorrectParams):
        Ellipsoid.new(-1.0, 298.0)

    with pytest.raises(IncorrectParams):
        Ellipsoid.new(6378137.0, 1.0)

    with pytest.raises(IncorrectParams):
        Ellipsoid.new(6378137.0, 0.5)

    with pytest.raises(ParamNotFinite) as e:
        Ellipsoid.new(math.nan, 298.0)
    assert e.value.name == 'semi_major_axis'

    with pytest.raises(ParamNotFinite) as e:
        Ellipsoid.new(6378137.0, math.inf)
    assert e.value.name == 'inverse_flattening'


def test_ellipsoid_raw_constructor():
    ellps = Ellipsoid(10.0, 9.0, 0.5, 0.1)
    assert (ellps.A, ellps.B, ellps.E, ellps.F) == (10.0, 9.0, 0.5, 0.1)

    with pytest.raises(ValidationError):
        Ellipsoid('not a number', 9.0, 0.5, 0.1)


def test_ellipsoid_eq_hash():
    assert WGS84 == Ellipsoid.new(6378137.0, 298.257223563)
    assert WGS84 != GRS80
    assert WGS84 != 'WGS84'
    assert hash(WGS84) == hash(Ellipsoid.new(6378137.0, 298.257223563))
    assert len({WGS84, GRS80, Ellipsoid.new(6378137.0, 298.257223563)}) == 2


def test_ellipsoid_repr():
    assert repr(Ellipsoid(10.0, 9.0, 0.5, 0.1)) == '<Ellipsoid(A=10.0, B=9.0, E=0.5, F=0.1)>'


def test_ellipsoid_geodesic():
    geod = WGS84.to_geodesic()
    assert isinstance(geod, Geodesic)
    assert geod.a == WGS84.A
    assert geod.f == approx(WGS84.F)

    assert Ellipsoid.from_geodesic(geod).to_tuple() == approx(WGS84.to_tuple(), rel=1e-12)
    assert Ellipsoid.from_geodesic(Geodesic(6370997.0, 0)) == SPHERE


def test_ellipsoid_derivations_validate_types():
    with pytest.raises(ValidationError):
        Ellipsoid.new('not a number', 298.0)

    with pytest.raises(ValidationError):
        Ellipsoid.sphere('not a number')

    assert Ellipsoid.new(6378137, 298.257223563) == WGS84
