"""
Azimuthal Equidistant projection, computed with ellipsoidal geodesics
"""

__all__ = ['AzimuthalEquidistant', 'AzimuthalEquidistantBuilder']

import math
from typing import Any, Dict, Optional, Tuple

import numpy as np
from geographiclib.geodesic import Geodesic
from pydantic import validate_call
from typing_extensions import Self

from geoprojections._base import Projection, ProjectionBuilder
from geoprojections._const import LAT_RANGE, LON_RANGE
from geoprojections.ellipsoids import WGS84, Ellipsoid
from geoprojections.errors import ensure_finite, ensure_within_range, unpack_required
from geoprojections.utils.logging import LOGGER

_INVERSE_MASK = Geodesic.DISTANCE | Geodesic.AZIMUTH
_DIRECT_MASK = Geodesic.LATITUDE | Geodesic.LONGITUDE


class AzimuthalEquidistant(Projection):
    """
    Azimuthal Equidistant projection: every point on the map is at the true
    distance and azimuth from the reference point.

    Distances and azimuths are computed by solving the inverse and direct geodesic
    problems on the ellipsoid (Karney's algorithms, via geographiclib), which makes
    this projection exact for any ellipsoid and any distance, but slower than
    ModifiedAzimuthalEquidistant.

    Summary by Snyder (1987), "Map projections: A working manual":
        - Azimuthal.
        - Distances measured from the center are true.
        - Distances not measured along radii from the center are not correct.
        - The center of projection is the only point without distortion.
        - Directions from the center are true.
        - Neither equal-area nor conformal.

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

        self._lon_0 = ref_lon
        self._lat_0 = ref_lat
        self._ellipsoid = ellipsoid
        self._geodesic = ellipsoid.to_geodesic()

        LOGGER.debug('Initialized %r', self)

    @classmethod
    def builder(cls) -> 'AzimuthalEquidistantBuilder':
        """Creates a builder for this projection"""
        return AzimuthalEquidistantBuilder()

    def _parameters(self) -> Dict[str, Any]:
        return {
            'ref_lon': self._lon_0,
            'ref_lat': self._lat_0,
            'ellipsoid': self._ellipsoid,
        }

    def _project_point(self, lon: float, lat: float) -> Tuple[float, float]:
        if not (math.isfinite(lon) and math.isfinite(lat)):
            return math.nan, math.nan

        res = self._geodesic.Inverse(self._lat_0, self._lon_0, lat, lon, _INVERSE_MASK)
        distance, azimuth = res['s12'], math.radians(res['azi1'])

        return distance * math.sin(azimuth), distance * math.cos(azimuth)

    def _inverse_project_point(self, x: float, y: float) -> Tuple[float, float]:
        if not (math.isfinite(x) and math.isfinite(y)):
            return math.nan, math.nan

        azimuth = math.degrees(math.atan2(x, y))
        distance = math.hypot(x, y)

        res = self._geodesic.Direct(self._lat_0, self._lon_0, azimuth, distance, _DIRECT_MASK)
        return res['lon2'], res['lat2']

    def _project(self, lon, lat):
        return np.vectorize(self._project_point, otypes=[np.float64, np.float64])(lon, lat)

    def _inverse_project(self, x, y):
        return np.vectorize(self._inverse_project_point, otypes=[np.float64, np.float64])(x, y)


class AzimuthalEquidistantBuilder(ProjectionBuilder[AzimuthalEquidistant]):
    """
    Builds an AzimuthalEquidistant projection. Reference longitude/latitude are
    required; the ellipsoid defaults to WGS84.
    """

    _projection_type = AzimuthalEquidistant

    def ref_lonlat(self, lon: float, lat: float) -> Self:
        """*(required)* Sets reference longitude and latitude, in degrees"""
        return self._set(ref_lon=lon, ref_lat=lat)

    def ellipsoid(self, ellps: Ellipsoid) -> Self:
        """*(optional)* Sets the reference ellipsoid, defaults to WGS84"""
        return self._set(ellipsoid=ellps)
