"""
Representation of the reference ellipsoids used to model the shape of the earth
"""

__all__ = [
    'Ellipsoid', 'AIRY1830', 'CLARKE1866', 'GRS67', 'GRS80', 'SPHERE',
    'WGS60', 'WGS66', 'WGS72', 'WGS84'
]

import math
from typing import ClassVar

from geographiclib.geodesic import Geodesic
from pydantic import validate_call
from typing_extensions import Self

from geoprojections._const import SPHERE_RADIUS_METERS, WGS84_A, WGS84_INV_F
from geoprojections.errors import IncorrectParams, ensure_finite


class Ellipsoid:
    """
    An oblate ellipsoid of revolution, described by its semi-major axis (A),
    semi-minor axis (B), first eccentricity (E) and flattening (F).

    Ellipsoids are immutable values. The raw constructor stores the four values as
    given; use Ellipsoid.new() to derive them from a semi-major axis and an inverse
    flattening, or one of the named constants (e.g. Ellipsoid.WGS84).
    """

    WGS84: ClassVar['Ellipsoid']
    GRS80: ClassVar['Ellipsoid']
    WGS72: ClassVar['Ellipsoid']
    WGS66: ClassVar['Ellipsoid']
    WGS60: ClassVar['Ellipsoid']
    GRS67: ClassVar['Ellipsoid']
    AIRY1830: ClassVar['Ellipsoid']
    CLARKE1866: ClassVar['Ellipsoid']
    SPHERE: ClassVar['Ellipsoid']

    @validate_call
    def __init__(
        self,
        semi_major_axis: float,
        semi_minor_axis: float,
        eccentricity: float,
        flattening: float,
    ):
        self._a = semi_major_axis
        self._b = semi_minor_axis
        self._e = eccentricity
        self._f = flattening

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return f'<Ellipsoid(A={self._a}, B={self._b}, E={self._e}, F={self._f})>'

    @property
    def A(self) -> float:  # pylint: disable=invalid-name
        """Semi-major axis, in meters"""
        return self._a

    @property
    def B(self) -> float:  # pylint: disable=invalid-name
        """Semi-minor axis, in meters"""
        return self._b

    @property
    def E(self) -> float:  # pylint: disable=invalid-name
        """First eccentricity"""
        return self._e

    @property
    def F(self) -> float:  # pylint: disable=invalid-name
        """Flattening"""
        return self._f

    @classmethod
    @validate_call
    def new(cls, semi_major_axis: float, inverse_flattening: float) -> Self:
        """
        Creates an ellipsoid from its semi-major axis and inverse flattening, which is
        how geodetic datums are usually published.

        Args:
            semi_major_axis:
                The equatorial radius, in meters

            inverse_flattening:
                The reciprocal of the flattening, i.e. A / (A - B)

        Returns:
            Ellipsoid

        Raises:
            ParamNotFinite: if either argument is NaN or infinite
            IncorrectParams: if the semi-major axis is not positive, or the
                inverse flattening does not exceed 1
        """
        ensure_finite(
            semi_major_axis=semi_major_axis,
            inverse_flattening=inverse_flattening
        )
        if semi_major_axis <= 0:
            raise IncorrectParams('semi-major axis must be positive')

        if inverse_flattening <= 1:
            raise IncorrectParams('inverse flattening must be greater than 1')

        flattening = 1 / inverse_flattening
        semi_minor_axis = semi_major_axis - semi_major_axis / inverse_flattening
        eccentricity = math.sqrt(1 - (semi_minor_axis / semi_major_axis) ** 2)

        return cls(semi_major_axis, semi_minor_axis, eccentricity, flattening)

    @classmethod
    @validate_call
    def sphere(cls, radius: float) -> Self:
        """Creates a spherical ellipsoid (E = F = 0) of the given radius, in meters"""
        ensure_finite(radius=radius)
        if radius <= 0:
            raise IncorrectParams('sphere radius must be positive')

        return cls(radius, radius, 0.0, 0.0)

    @classmethod
    def from_geodesic(cls, geodesic: Geodesic) -> Self:
        """
        Recovers the ellipsoid a geographiclib Geodesic was built from.

        Args:
            geodesic:
                A geographiclib.geodesic.Geodesic

        Returns:
            Ellipsoid
        """
        if geodesic.f == 0:
            return cls.sphere(geodesic.a)

        return cls.new(geodesic.a, 1 / geodesic.f)

    def to_geodesic(self) -> Geodesic:
        """
        Creates a geographiclib Geodesic, which solves the direct and inverse geodesic
        problems on this ellipsoid.
        """
        return Geodesic(self._a, self._f)

    def to_tuple(self):
        """Returns the ellipsoid as an (A, B, E, F) tuple"""
        return self._a, self._b, self._e, self._f


WGS84 = Ellipsoid.new(WGS84_A, WGS84_INV_F)
GRS80 = Ellipsoid.new(6_378_137.0, 298.257_222_101)
WGS72 = Ellipsoid.new(6_378_135.0, 298.26)
WGS66 = Ellipsoid.new(6_378_145.0, 298.25)
WGS60 = Ellipsoid.new(6_378_165.0, 298.3)
GRS67 = Ellipsoid.new(6_378_160.0, 298.247_167_427)
AIRY1830 = Ellipsoid.new(6_377_563.396, 299.324_964_6)
CLARKE1866 = Ellipsoid.new(6_378_206.4, 294.978_698_2)
SPHERE = Ellipsoid.sphere(SPHERE_RADIUS_METERS)

Ellipsoid.WGS84 = WGS84
Ellipsoid.GRS80 = GRS80
Ellipsoid.WGS72 = WGS72
Ellipsoid.WGS66 = WGS66
Ellipsoid.WGS60 = WGS60
Ellipsoid.GRS67 = GRS67
Ellipsoid.AIRY1830 = AIRY1830
Ellipsoid.CLARKE1866 = CLARKE1866
Ellipsoid.SPHERE = SPHERE
