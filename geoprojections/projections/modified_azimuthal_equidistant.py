"""
Modified Azimuthal Equidistant projection
"""

__all__ = ['ModifiedAzimuthalEquidistant', 'ModifiedAzimuthalEquidistantBuilder']

import math
from typing import Any, Dict, Optional

import numpy as np
from pydantic import validate_call
from typing_extensions import Self

from geoprojections._base import Projection, ProjectionBuilder
from geoprojections._const import FLOAT_EPSILON, LAT_RANGE, LON_RANGE
from geoprojections.ellipsoids import WGS84, Ellipsoid
from geoprojections.errors import ensure_finite, ensure_within_range, unpack_required
from geoprojections.utils.logging import LOGGER


class ModifiedAzimuthalEquidistant(Projection):
    """
    A modified version of the Azimuthal Equidistant projection, defined for the islands
    of Micronesia and described by Snyder (1987), "Map projections: A working manual",
    pp. 199-200.

    It replaces geodesic computations with closed-form series, so it is considerably
    faster than AzimuthalEquidistant, but it diverges from the exact projection as the
    distance from the reference point grows. It is intended for maps covering a few
    hundred kilometers around the reference point.

    Args:
        ref_lon:
            Reference longitude, in degrees. Point (0, 0) on the map is at
            (ref_lon, ref_lat).

        ref_lat:
            Reference latitude, in degrees

        ellipsoid: (Default WGS84)
            The reference ellipsoid
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        ref_lon: Optional[float] = None,
        ref_lat: Optional[float] = None,
        ellipsoid: Ellipsoid = WGS84,
    ):
        ref_lon = unpack_required('ref_lon', ref_lon)
        ref_lat = unpack_required('ref_lat', ref_lat)

        ensure_finite(ref_lon=ref_lon, ref_lat=ref_lat)
        ensure_within_range('ref_lon', ref_lon, LON_RANGE)
        ensure_within_range('ref_lat', ref_lat, LAT_RANGE)

        self._params = {'ref_lon': ref_lon, 'ref_lat': ref_lat, 'ellipsoid': ellipsoid}

        self._lon_0 = math.radians(ref_lon)
        self._lat_0 = math.radians(ref_lat)
        self._sin_lat_0 = math.sin(self._lat_0)
        self._cos_lat_0 = math.cos(self._lat_0)

        self._a = ellipsoid.A
        self._e = ellipsoid.E
        self._e2 = ellipsoid.E ** 2
        self._sqrt_one_minus_e2 = math.sqrt(1 - self._e2)

        # Radius of curvature in the prime vertical at the reference latitude
        self._n_1 = self._a / math.sqrt(1 - self._e2 * self._sin_lat_0 ** 2)
        self._g = self._e * self._sin_lat_0 / self._sqrt_one_minus_e2

        LOGGER.debug('Initialized %r', self)

    @classmethod
    def builder(cls) -> 'ModifiedAzimuthalEquidistantBuilder':
        """Creates a builder for this projection"""
        return ModifiedAzimuthalEquidistantBuilder()

    def _parameters(self) -> Dict[str, Any]:
        return self._params

    def _project(self, lon, lat):
        d_lon = np.radians(lon) - self._lon_0
        lat = np.radians(lat)
        sin_d_lon = np.sin(d_lon)

        n = self._a / np.sqrt(1 - self._e2 * np.sin(lat) ** 2)
        psi = np.arctan(
            (1 - self._e2) * np.tan(lat)
            + self._e2 * self._n_1 * self._sin_lat_0 / (n * np.cos(lat))
        )

        az = np.arctan2(
            sin_d_lon,
            self._cos_lat_0 * np.tan(psi) - self._sin_lat_0 * np.cos(d_lon)
        )
        sin_az, cos_az = np.sin(az), np.cos(az)

        # Along the reference meridian sin(az) vanishes and s is taken directly from the
        # difference of the auxiliary latitudes, signed so that s stays positive
        along_meridian = np.abs(sin_az) <= FLOAT_EPSILON
        s = np.where(
            along_meridian,
            np.arcsin(self._cos_lat_0 * np.sin(psi) - self._sin_lat_0 * np.cos(psi))
            * np.copysign(1.0, cos_az),
            np.arcsin(sin_d_lon * np.cos(psi) / np.where(along_meridian, 1.0, sin_az)),
        )

        h = self._e * self._cos_lat_0 * cos_az / self._sqrt_one_minus_e2
        g = self._g
        h2 = h ** 2

        c = self._n_1 * s * (
            1
            - s ** 2 * h2 * (1 - h2) / 6
            + (s ** 3 / 8) * g * h * (1 - 2 * h2)
            + (s ** 4 / 120) * (h2 * (4 - 7 * h2) - 3 * g ** 2 * (1 - 7 * h2))
            - (s ** 5 / 48) * g * h
        )

        return c * sin_az, c * cos_az

    def _inverse_project(self, x, y):
        c = np.hypot(x, y)
        az = np.arctan2(x, y)
        sin_az, cos_az = np.sin(az), np.cos(az)
        one_minus_e2 = 1 - self._e2

        big_a = -self._e2 * self._cos_lat_0 ** 2 * cos_az ** 2 / one_minus_e2
        big_b = (
            3 * self._e2 * (1 - big_a) * self._sin_lat_0 * self._cos_lat_0 * cos_az
            / one_minus_e2
        )
        big_d = c / self._n_1
        big_e = (
            big_d
            - big_a * (1 + big_a) * big_d ** 3 / 6
            - big_b * (1 + 3 * big_a) * big_d ** 4 / 24
        )
        big_f = 1 - big_a * big_e ** 2 / 2 - big_b * big_e ** 3 / 6

        psi = np.arcsin(
            self._sin_lat_0 * np.cos(big_e) + self._cos_lat_0 * np.sin(big_e) * cos_az
        )
        cos_psi = np.cos(psi)

        lon = self._lon_0 + np.arcsin(sin_az * np.sin(big_e) / cos_psi)

        # Snyder eq. 25-27, multiplied through by tan(psi) to stay finite at psi = 0
        lat = np.arctan(
            (np.tan(psi) - self._e2 * big_f * self._sin_lat_0 / cos_psi) / one_minus_e2
        )

        return np.degrees(lon), np.degrees(lat)


class ModifiedAzimuthalEquidistantBuilder(ProjectionBuilder[ModifiedAzimuthalEquidistant]):
    """
    Builds a ModifiedAzimuthalEquidistant projection. Reference longitude/latitude are
    required; the ellipsoid defaults to WGS84.
    """

    _projection_type = ModifiedAzimuthalEquidistant

    def ref_lonlat(self, lon: float, lat: float) -> Self:
        """*(required)* Sets reference longitude and latitude, in degrees"""
        return self._set(ref_lon=lon, ref_lat=lat)

    def ellipsoid(self, ellps: Ellipsoid) -> Self:
        """*(optional)* Sets the reference ellipsoid, defaults to WGS84"""
        return self._set(ellipsoid=ellps)
