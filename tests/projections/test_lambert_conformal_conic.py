import math

import numpy as np
import pytest
from pydantic import ValidationError
from pytest import approx

from geoprojections import (
    CLARKE1866, GRS80, WGS84, IncorrectParams, LambertConformalConic,
    ParamNotFinite, ParamOutOfRange, ParamRequired, ProjectionImpossible
)

from tests.functions import (
    GLOBAL_GEO_POINTS, LOCAL_GEO_POINTS, MAP_POINTS, PROJ_ELLIPSOIDS,
    assert_matches_proj, assert_pairs_equal, assert_round_trip
)


def _lcc(ref_lon=30.0, ref_lat=30.0, lat_1=30.0, lat_2=60.0, ellps=WGS84):
    return (
        LambertConformalConic.builder()
        .ref_lonlat(ref_lon, ref_lat)
        .standard_parallels(lat_1, lat_2)
        .ellipsoid(ellps)
        .initialize_projection()
    )


def test_lcc_reference_point():
    lcc = _lcc(2.0, 0.0, 30.0, 60.0)
    assert_pairs_equal(lcc.project(6.8651, 45.8326), (364836.440779, 5421073.726336), 1e-3)

    # The reference point maps to the origin
    assert_pairs_equal(_lcc().project(30.0, 30.0), (0.0, 0.0), 1e-6)


def test_lcc_tangent_cone():
    lcc = _lcc(30.0, 30.0, 40.0, 40.0)
    assert lcc.n == approx(math.sin(math.radians(40.0)))
    assert_round_trip(lcc, GLOBAL_GEO_POINTS)


def test_lcc_symmetric_parallels():
    for lat in (1.0, 30.0, 45.0, 89.0):
        with pytest.raises(IncorrectParams):
            _lcc(lat_1=lat, lat_2=-lat)

    with pytest.raises(IncorrectParams):
        _lcc(lat_1=0.0, lat_2=0.0)


def test_lcc_parallels_same_hemisphere():
    for lat_1 in range(1, 90, 11):
        for lat_2 in range(1, 90, 11):
            assert _lcc(lat_1=float(lat_1), lat_2=float(lat_2)).n > 0
            assert _lcc(lat_1=-float(lat_1), lat_2=-float(lat_2)).n < 0


def test_lcc_southern_cone():
    lcc = _lcc(-60.0, -30.0, -30.0, -60.0)
    assert lcc.n < 0
    assert_pairs_equal(lcc.project(-60.0, -30.0), (0.0, 0.0), 1e-6)
    assert_round_trip(lcc, [(-65.0, -35.0), (-50.0, -20.0), (-70.0, -55.0), (-60.0, 10.0)])


def test_lcc_validation():
    with pytest.raises(ParamRequired) as e:
        LambertConformalConic.builder().ref_lonlat(0.0, 0.0).initialize_projection()
    assert e.value.name == 'std_par_1'

    with pytest.raises(ParamRequired) as e:
        LambertConformalConic.builder().standard_parallels(30.0, 60.0).initialize_projection()
    assert e.value.name == 'ref_lon'

    with pytest.raises(ParamNotFinite) as e:
        _lcc(ref_lon=math.nan, ref_lat=100.0)
    assert e.value.name == 'ref_lon'

    with pytest.raises(ParamNotFinite):
        _lcc(lat_2=math.inf)

    with pytest.raises(ParamOutOfRange) as e:
        _lcc(ref_lon=180.0)
    assert e.value.name == 'ref_lon'

    with pytest.raises(ParamOutOfRange):
        _lcc(ref_lat=-90.5)

    with pytest.raises(ParamOutOfRange):
        _lcc(lat_1=90.0)

    # Lower bounds are permitted
    _lcc(ref_lon=-180.0, ref_lat=-90.0)

    with pytest.raises(ValidationError):
        LambertConformalConic(ref_lon='east', ref_lat=0.0, std_par_1=30.0, std_par_2=60.0)


def test_lcc_default_ellipsoid():
    lcc = LambertConformalConic.builder() \
        .ref_lonlat(30.0, 30.0) \
        .standard_parallels(30.0, 60.0) \
        .initialize_projection()
    assert lcc == _lcc()
    assert lcc != _lcc(ellps=GRS80)
    assert lcc != _lcc(ellps=CLARKE1866)


def test_lcc_properties():
    lcc = _lcc()
    assert 0 < lcc.n < 1
    assert lcc.big_f > 0
    assert lcc.rho_0 > 0


def test_lcc_round_trip():
    lcc = _lcc()
    assert_round_trip(lcc, GLOBAL_GEO_POINTS)
    assert_round_trip(lcc, LOCAL_GEO_POINTS)


def test_lcc_arrays():
    lcc = _lcc()
    lons = np.array([[25.0, 30.0], [35.0, 40.0]])
    xs, ys = lcc.project(lons, 45.0)
    assert xs.shape == (2, 2)

    for i in range(2):
        for j in range(2):
            assert_pairs_equal((xs[i, j], ys[i, j]), lcc.project(lons[i, j], 45.0), 1e-9)


def test_lcc_not_finite():
    lcc = _lcc()
    with pytest.raises(ProjectionImpossible):
        lcc.project(math.nan, 45.0)

    x, y = lcc.project_unchecked(math.nan, 45.0)
    assert math.isnan(x)


def test_lcc_proj():
    for ellps, name in PROJ_ELLIPSOIDS:
        for lat_1, lat_2 in ((30.0, 60.0), (40.0, 40.0)):
            lcc = _lcc(30.0, 30.0, lat_1, lat_2, ellps)
            proj_str = (
                f'+proj=lcc +lat_1={lat_1} +lat_2={lat_2} '
                f'+lon_0=30.0 +lat_0=30.0 +ellps={name}'
            )
            assert_matches_proj(lcc, proj_str, GLOBAL_GEO_POINTS + LOCAL_GEO_POINTS, MAP_POINTS)
