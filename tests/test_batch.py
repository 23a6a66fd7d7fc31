import math

import numpy as np
import pytest

from geoprojections import (
    LambertConformalConic, LongitudeLatitude, ProjectionImpossible,
    InverseProjectionImpossible, convert_batch, inverse_project_batch, project_batch
)


@pytest.fixture
def lcc():
    return LambertConformalConic(ref_lon=30.0, ref_lat=30.0, std_par_1=30.0, std_par_2=60.0)


def test_project_batch_matches_direct(lcc):
    lons = np.linspace(20.0, 40.0, 101)
    lats = np.linspace(35.0, 55.0, 101)
    expected_x, expected_y = lcc.project(lons, lats)

    for max_workers in (None, 1, 4):
        xs, ys = project_batch(lcc, lons, lats, max_workers=max_workers, chunk_size=10)
        np.testing.assert_array_equal(xs, expected_x)
        np.testing.assert_array_equal(ys, expected_y)


def test_project_batch_shape(lcc):
    lons = np.full((3, 4), 30.0)
    xs, ys = project_batch(lcc, lons, 45.0, chunk_size=5)
    assert xs.shape == ys.shape == (3, 4)
    assert xs.dtype == np.float64

    xs, ys = project_batch(lcc, 30.0, 45.0)
    assert xs.shape == ()

    xs, ys = project_batch(lcc, [], [])
    assert xs.shape == ys.shape == (0,)


def test_inverse_project_batch(lcc):
    lons = np.linspace(20.0, 40.0, 50)
    xs, ys = project_batch(lcc, lons, 45.0, chunk_size=7, max_workers=3)
    rt_lons, rt_lats = inverse_project_batch(lcc, xs, ys, chunk_size=7, max_workers=3)
    np.testing.assert_allclose(rt_lons, lons, atol=1e-8)
    np.testing.assert_allclose(rt_lats, 45.0, atol=1e-8)


def test_convert_batch(lcc):
    pipe = LongitudeLatitude().pipe_to(lcc)
    lons = np.linspace(20.0, 40.0, 30)
    xs, ys = convert_batch(pipe, lons, 45.0, chunk_size=4, max_workers=2)
    np.testing.assert_array_equal(xs, lcc.project(lons, 45.0)[0])


def test_batch_checked_reports_first_failure(lcc):
    lons = np.linspace(20.0, 40.0, 100)
    lats = np.full(100, 45.0)
    lats[42] = math.nan
    lats[87] = math.nan
    lons[87] = 99.0

    for max_workers in (None, 4):
        with pytest.raises(ProjectionImpossible) as e:
            project_batch(lcc, lons, lats, max_workers=max_workers, chunk_size=10)
        assert e.value.lon == lons[42]

    with pytest.raises(InverseProjectionImpossible):
        inverse_project_batch(lcc, [0.0, math.nan], [0.0, 0.0])


def test_batch_unchecked_keeps_nan(lcc):
    lats = np.array([45.0, math.nan, 45.0])
    xs, ys = project_batch(lcc, 30.0, lats, checked=False, chunk_size=1, max_workers=2)
    assert np.isfinite(xs[0]) and np.isfinite(xs[2])
    assert np.isnan(xs[1])
    assert np.isnan(ys[1])


def test_batch_invalid_arguments(lcc):
    with pytest.raises(ValueError):
        project_batch(lcc, [1.0], [1.0], chunk_size=0)

    with pytest.raises(ValueError):
        project_batch(lcc, [1.0], [1.0], max_workers=0)

    with pytest.raises(ValueError):
        inverse_project_batch(lcc, [1.0], [1.0], max_workers=-1)
