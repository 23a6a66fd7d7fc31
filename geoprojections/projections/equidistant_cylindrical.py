"""
Equidistant Cylindrical (equirectangular) projection
"""

__all__ = ['EquidistantCylindrical', 'EquidistantCylindricalBuilder']

import math
from typing import Any, Dict, Optional

import numpy as np
from pydantic import validate_call
from typing_extensions import Self

from geoprojections._base import Projection, ProjectionBuilder
from geoprojections._const import LAT_RANGE, LON_RANGE
from geoprojections.ellipsoids import SPHERE
from geoprojections.errors import ensure_finite, ensure_within_range, unpack_required
from geoprojections.utils.logging import LOGGER


class EquidistantCylindrical(Projection):
    """
    The equirectangular projection (also called the equidistant cylindrical
    projection), which includes the special case of the plate carrée projection.

    Summary by Snyder (1987), "Map projections: A working manual":
        - Cylindrical.
        - Neither equal-area nor conformal.
        - Meridians and parallels are equidistant straight lines, intersecting at
          right angles.
        - Poles shown as lines.
        - Used only in spherical form.

    The projection is only defined for a sphere, so no ellipsoid can be set; the
    radius of the PROJ "sphere" ellipsoid (6370997 m) is always used. When the
    reference longitude, reference latitude and standard parallel are all 0 this
    projection is plate carrée.

    Args:
        ref_lon:
            Reference longitude, in degrees. Point (0, 0) on the map is at
            (ref_lon, ref_lat).

        ref_lat:
            Reference latitude, in degrees

        std_par:
            The standard parallel (latitude, in degrees) along which scale is true
    """

    @validate_call
    def __init__(
        self,
        ref_lon: Optional[float] = None,
        ref_lat: Optional[float] = None,
        std_par: Optional[float] = None,
    ):
        ref_lon = unpack_required('ref_lon', ref_lon)
        ref_lat = unpack_required('ref_lat', ref_lat)
        std_par = unpack_required('std_par', std_par)

        ensure_finite(ref_lon=ref_lon, ref_lat=ref_lat, std_par=std_par)
        ensure_within_range('ref_lon', ref_lon, LON_RANGE)
        ensure_within_range('ref_lat', ref_lat, LAT_RANGE)
        ensure_within_range('std_par', std_par, LAT_RANGE)

        self._params = {'ref_lon': ref_lon, 'ref_lat': ref_lat, 'std_par': std_par}

        self._ref_lon = math.radians(ref_lon)
        self._ref_lat = math.radians(ref_lat)

        self._r = SPHERE.A
        self._r_cos_std_par = self._r * math.cos(math.radians(std_par))

        LOGGER.debug('Initialized %r', self)

    @classmethod
    def builder(cls) -> 'EquidistantCylindricalBuilder':
        """Creates a builder for this projection"""
        return EquidistantCylindricalBuilder()

    def _parameters(self) -> Dict[str, Any]:
        return self._params

    def _project(self, lon, lat):
        x = self._r_cos_std_par * (np.radians(lon) - self._ref_lon)
        y = self._r * (np.radians(lat) - self._ref_lat)
        return x, y

    def _inverse_project(self, x, y):
        lon = x / self._r_cos_std_par + self._ref_lon
        lat = y / self._r + self._ref_lat
        return np.degrees(lon), np.degrees(lat)


class EquidistantCylindricalBuilder(ProjectionBuilder[EquidistantCylindrical]):
    """
    Builds an EquidistantCylindrical projection. Reference longitude/latitude and the
    standard parallel are both required.
    """

    _projection_type = EquidistantCylindrical

    def ref_lonlat(self, lon: float, lat: float) -> Self:
        """*(required)* Sets reference longitude and latitude, in degrees"""
        return self._set(ref_lon=lon, ref_lat=lat)

    def standard_parallel(self, lat: float) -> Self:
        """*(required)* Sets the latitude, in degrees, along which scale is true"""
        return self._set(std_par=lat)
