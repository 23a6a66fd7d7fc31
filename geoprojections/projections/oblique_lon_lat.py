"""
Oblique Longitude-Latitude (rotated pole) projection
"""

__all__ = ['ObliqueLonLat', 'ObliqueLonLatBuilder']

import math
from typing import Any, Dict, Optional

import numpy as np
from pydantic import validate_call
from typing_extensions import Self

from geoprojections._base import Projection, ProjectionBuilder
from geoprojections._const import LAT_RANGE, LON_RANGE
from geoprojections.errors import ensure_finite, ensure_within_range, unpack_required
from geoprojections.utils.logging import LOGGER


def _adjust_lon(lon):
    """Wraps longitudes (in degrees) at most one revolution back toward -180..180"""
    return np.where(lon > 180.0, lon - 360.0, np.where(lon < -180.0, lon + 360.0, lon))


class ObliqueLonLat(Projection):
    """
    An oblique longitude-latitude projection (also known as Rotated Pole), which
    rotates the graticule so that the "north pole" of the coordinate system lies
    somewhere other than the true North Pole.

    Unlike the other projections, the map coordinates are the rotated longitude and
    latitude, in degrees. The projection does not depend on the ellipsoid.

    Args:
        pole_lon:
            Longitude of the rotated pole, in degrees

        pole_lat:
            Latitude of the rotated pole, in degrees

        central_lon: (Default 0.0)
            Longitude of the central meridian, in degrees
    """

    @validate_call
    def __init__(
        self,
        pole_lon: Optional[float] = None,
        pole_lat: Optional[float] = None,
        central_lon: float = 0.0,
    ):
        pole_lon = unpack_required('pole_lon', pole_lon)
        pole_lat = unpack_required('pole_lat', pole_lat)

        ensure_finite(pole_lon=pole_lon, pole_lat=pole_lat, central_lon=central_lon)
        ensure_within_range('pole_lon', pole_lon, LON_RANGE)
        ensure_within_range('pole_lat', pole_lat, LAT_RANGE)
        ensure_within_range('central_lon', central_lon, LON_RANGE)

        self._params = {'pole_lon': pole_lon, 'pole_lat': pole_lat, 'central_lon': central_lon}

        phi_p = math.radians(pole_lat)
        self._lambda_p = math.radians(pole_lon)
        self._sin_phi_p = math.sin(phi_p)
        self._cos_phi_p = math.cos(phi_p)
        self._lon_0 = central_lon

        LOGGER.debug('Initialized %r', self)

    @classmethod
    def builder(cls) -> 'ObliqueLonLatBuilder':
        """Creates a builder for this projection"""
        return ObliqueLonLatBuilder()

    def _parameters(self) -> Dict[str, Any]:
        return self._params

    def _project(self, lon, lat):
        lam = np.radians(lon - self._lon_0)
        phi = np.radians(lat)

        cos_lam, sin_lam = np.cos(lam), np.sin(lam)
        cos_phi, sin_phi = np.cos(phi), np.sin(phi)

        # Snyder (1987) eq. 5-8b
        lam_prime = np.arctan2(
            cos_phi * sin_lam,
            self._sin_phi_p * cos_phi * cos_lam + self._cos_phi_p * sin_phi
        ) + self._lambda_p

        # Snyder (1987) eq. 5-7
        phi_prime = np.arcsin(
            self._sin_phi_p * sin_phi - self._cos_phi_p * cos_phi * cos_lam
        )

        return _adjust_lon(np.degrees(lam_prime)), np.degrees(phi_prime)

    def _inverse_project(self, x, y):
        lam_prime = np.radians(x) - self._lambda_p
        phi_prime = np.radians(y)

        cos_lam, sin_lam = np.cos(lam_prime), np.sin(lam_prime)
        cos_phi, sin_phi = np.cos(phi_prime), np.sin(phi_prime)

        # Snyder (1987) eq. 5-10b
        lam = np.arctan2(
            cos_phi * sin_lam,
            self._sin_phi_p * cos_phi * cos_lam - self._cos_phi_p * sin_phi
        )

        # Snyder (1987) eq. 5-9
        phi = np.arcsin(
            self._sin_phi_p * sin_phi + self._cos_phi_p * cos_phi * cos_lam
        )

        return _adjust_lon(np.degrees(lam) + self._lon_0), np.degrees(phi)


class ObliqueLonLatBuilder(ProjectionBuilder[ObliqueLonLat]):
    """
    Builds an ObliqueLonLat projection. The pole longitude/latitude are required; the
    central longitude defaults to 0.
    """

    _projection_type = ObliqueLonLat

    def pole_lonlat(self, lon: float, lat: float) -> Self:
        """*(required)* Sets the longitude and latitude of the rotated pole, in degrees"""
        return self._set(pole_lon=lon, pole_lat=lat)

    def central_lon(self, lon: float) -> Self:
        """*(optional)* Sets the central meridian longitude, defaults to 0.0"""
        return self._set(central_lon=lon)
