"""
The identity projection
"""

__all__ = ['LongitudeLatitude']

from typing import Any, Dict

from geoprojections._base import Projection


class LongitudeLatitude(Projection):
    """
    A trivial projection that does not project anything: map coordinates are the
    longitude and latitude themselves.

    Its purpose is to stand in for geographic coordinates wherever a projection is
    expected, e.g. as the source or target of a ConversionPipe.
    """

    def _parameters(self) -> Dict[str, Any]:
        return {}

    def _project(self, lon, lat):
        return lon, lat

    def _inverse_project(self, x, y):
        return x, y
