"""
Lambert Conformal Conic projection
"""

__all__ = ['LambertConformalConic', 'LambertConformalConicBuilder']

import math
from typing import Any, Dict, Optional

import numpy as np
from pydantic import validate_call
from typing_extensions import Self

from geoprojections._base import Projection, ProjectionBuilder
from geoprojections._const import LAT_RANGE, LON_RANGE
from geoprojections.ellipsoids import WGS84, Ellipsoid
from geoprojections.errors import (
    IncorrectParams, ensure_finite, ensure_within_range, unpack_required
)
from geoprojections.utils.functions import approx_eq
from geoprojections.utils.logging import LOGGER


def _t(phi, e: float):
    """Snyder (1987) eq. 15-9, works on floats and arrays alike"""
    sin_phi = np.sin(phi)
    return np.tan(math.pi / 4 - phi / 2) / ((1 - e * sin_phi) / (1 + e * sin_phi)) ** (e / 2)


def _m(phi: float, e: float) -> float:
    """Snyder (1987) eq. 14-15"""
    return math.cos(phi) / math.sqrt(1 - (e * math.sin(phi)) ** 2)


def _inverse_series_coefficients(e: float):
    """
    Coefficients of the series (Snyder (1987) eq. 3-5) recovering geodetic latitude from
    conformal latitude, rearranged for evaluation with a single sin/cos pair.
    """
    e2, e4, e6, e8 = e ** 2, e ** 4, e ** 6, e ** 8

    a = e2 / 2 + 5 * e4 / 24 + e6 / 12 + 13 * e8 / 360
    b = 7 * e4 / 48 + 29 * e6 / 240 + 811 * e8 / 11520
    c = 7 * e6 / 120 + 81 * e8 / 1120
    d = 4279 * e8 / 161280

    return a - c, 2 * b - 4 * d, 4 * c, 8 * d


class LambertConformalConic(Projection):
    """
    Lambert Conformal Conic projection, for the ellipsoid.

    Summary by Snyder (1987), "Map projections: A working manual":
        - Conic.
        - Conformal.
        - Parallels are unequally spaced arcs of concentric circles, more closely
          spaced near the center of the map.
        - Meridians are equally spaced radii of the same circles, thereby cutting
          parallels at right angles.
        - Scale is true along two standard parallels, normally, or along just one.
        - Pole in same hemisphere as standard parallels is a point; other pole is
          at infinity.
        - Used for maps of countries and regions with predominant east-west expanse.

    Equal standard parallels define the tangent cone (one standard parallel).
    Standard parallels symmetric about the equator do not define a cone and are
    rejected.

    Args:
        ref_lon:
            Reference longitude, in degrees. Point (0, 0) on the map is at
            (ref_lon, ref_lat).

        ref_lat:
            Reference latitude, in degrees

        std_par_1:
            First standard parallel, in degrees

        std_par_2:
            Second standard parallel, in degrees

        ellipsoid: (Default WGS84)
            The reference ellipsoid
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        ref_lon: Optional[float] = None,
        ref_lat: Optional[float] = None,
        std_par_1: Optional[float] = None,
        std_par_2: Optional[float] = None,
        ellipsoid: Ellipsoid = WGS84,
    ):
        ref_lon = unpack_required('ref_lon', ref_lon)
        ref_lat = unpack_required('ref_lat', ref_lat)
        std_par_1 = unpack_required('std_par_1', std_par_1)
        std_par_2 = unpack_required('std_par_2', std_par_2)

        ensure_finite(
            ref_lon=ref_lon, ref_lat=ref_lat, std_par_1=std_par_1, std_par_2=std_par_2
        )
        ensure_within_range('ref_lon', ref_lon, LON_RANGE)
        ensure_within_range('ref_lat', ref_lat, LAT_RANGE)
        ensure_within_range('std_par_1', std_par_1, LAT_RANGE)
        ensure_within_range('std_par_2', std_par_2, LAT_RANGE)

        if approx_eq(std_par_1 + std_par_2, 0.0):
            raise IncorrectParams('standard parallels cannot be symmetric about the equator')

        self._ellipsoid = ellipsoid
        self._params = {
            'ref_lon': ref_lon,
            'ref_lat': ref_lat,
            'std_par_1': std_par_1,
            'std_par_2': std_par_2,
            'ellipsoid': ellipsoid,
        }

        e = ellipsoid.E
        phi_0, phi_1, phi_2 = map(math.radians, (ref_lat, std_par_1, std_par_2))

        t_0, t_1, t_2 = float(_t(phi_0, e)), float(_t(phi_1, e)), float(_t(phi_2, e))
        m_1, m_2 = _m(phi_1, e), _m(phi_2, e)

        if approx_eq(phi_1, phi_2):
            n = math.sin(phi_1)
        else:
            n = (math.log(m_1) - math.log(m_2)) / (math.log(t_1) - math.log(t_2))

        self._lambda_0 = math.radians(ref_lon)
        self._n = n
        self._sign = math.copysign(1.0, n)
        self._big_f = m_1 / (n * t_1 ** n)
        self._a_big_f = ellipsoid.A * self._big_f
        self._rho_0 = self._a_big_f * t_0 ** n
        self._series = _inverse_series_coefficients(e)

        LOGGER.debug('Initialized %r', self)

    @classmethod
    def builder(cls) -> 'LambertConformalConicBuilder':
        """Creates a builder for this projection"""
        return LambertConformalConicBuilder()

    @property
    def n(self) -> float:
        """The cone constant"""
        return self._n

    @property
    def big_f(self) -> float:
        """The scale factor F (Snyder eq. 15-2)"""
        return self._big_f

    @property
    def rho_0(self) -> float:
        """Radius of the reference latitude's arc on the map, in meters"""
        return self._rho_0

    def _parameters(self) -> Dict[str, Any]:
        return self._params

    def _project(self, lon, lat):
        t = _t(np.radians(lat), self._ellipsoid.E)
        theta = self._n * (np.radians(lon) - self._lambda_0)
        rho = self._a_big_f * t ** self._n

        x = rho * np.sin(theta)
        y = self._rho_0 - rho * np.cos(theta)
        return x, y

    def _inverse_project(self, x, y):
        rho = self._sign * np.hypot(x, self._rho_0 - y)

        # Signs are flipped for a cone opening to the north (n < 0)
        theta = np.arctan2(self._sign * x, self._sign * (self._rho_0 - y))

        t = (rho / self._a_big_f) ** (1 / self._n)
        lam = theta / self._n + self._lambda_0

        return np.degrees(lam), np.degrees(self._latitude_from_t(t))

    def _latitude_from_t(self, t):
        a, b, c, d = self._series
        chi = math.pi / 2 - 2 * np.arctan(t)

        sin_2chi = np.sin(2 * chi)
        cos_2chi = np.cos(2 * chi)

        return chi + sin_2chi * (a + cos_2chi * (b + cos_2chi * (c + d * cos_2chi)))


class LambertConformalConicBuilder(ProjectionBuilder[LambertConformalConic]):
    """
    Builds a LambertConformalConic projection. Reference longitude/latitude and the
    standard parallels are required; the ellipsoid defaults to WGS84.
    """

    _projection_type = LambertConformalConic

    def ref_lonlat(self, lon: float, lat: float) -> Self:
        """*(required)* Sets reference longitude and latitude, in degrees"""
        return self._set(ref_lon=lon, ref_lat=lat)

    def standard_parallels(self, lat_1: float, lat_2: float) -> Self:
        """
        *(required)* Sets the standard parallels, in degrees. Pass the same latitude
        twice for a tangent cone.
        """
        return self._set(std_par_1=lat_1, std_par_2=lat_2)

    def ellipsoid(self, ellps: Ellipsoid) -> Self:
        """*(optional)* Sets the reference ellipsoid, defaults to WGS84"""
        return self._set(ellipsoid=ellps)
