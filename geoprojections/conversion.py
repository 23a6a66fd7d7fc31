"""
Conversion of map coordinates between two projections
"""

__all__ = ['ConversionPipe']

from typing import Generic

from geoprojections._types import COORDINATE_INPUT, COORDINATE_PAIR, SOURCE_TYPE, TARGET_TYPE
from geoprojections.utils.logging import log_transform


class ConversionPipe(Generic[SOURCE_TYPE, TARGET_TYPE]):
    """
    Converts map coordinates of one projection into map coordinates of another, by
    inverse projecting to longitude/latitude with the source projection and then
    projecting with the target projection.

    Both projections are expected to share the same ellipsoid; no datum shift is
    applied. Every conversion adds the numerical error of two transforms, so long
    chains of pipes (or repeated back-and-forth conversions) accumulate error. Convert
    through LongitudeLatitude where intermediate geographic coordinates are needed
    rather than chaining many projected steps.

    Args:
        source:
            The projection of the input coordinates

        target:
            The projection of the output coordinates
    """

    def __init__(self, source: SOURCE_TYPE, target: TARGET_TYPE):
        self._source = source
        self._target = target

    def __eq__(self, other):
        if not isinstance(other, ConversionPipe):
            return False

        return self._source == other._source and self._target == other._target

    def __hash__(self):
        return hash((self._source, self._target))

    def __repr__(self):
        return f'<ConversionPipe({self._source!r} -> {self._target!r})>'

    @property
    def source(self) -> SOURCE_TYPE:
        """The projection coordinates are converted from"""
        return self._source

    @property
    def target(self) -> TARGET_TYPE:
        """The projection coordinates are converted into"""
        return self._target

    @log_transform
    def convert(self, x: COORDINATE_INPUT, y: COORDINATE_INPUT) -> COORDINATE_PAIR:
        """
        Converts coordinates from the source projection to the target projection.

        Args:
            x:
                Source map x coordinate(s)

            y:
                Source map y coordinate(s)

        Returns:
            (x, y) in the target projection

        Raises:
            InverseProjectionImpossible: the source projection could not inverse
                project the input; the target projection is not invoked
            ProjectionImpossible: the target projection could not project the
                intermediate longitude/latitude
        """
        lon, lat = self._source.inverse_project(x, y)
        return self._target.project(lon, lat)

    def convert_unchecked(self, x: COORDINATE_INPUT, y: COORDINATE_INPUT) -> COORDINATE_PAIR:
        """
        Converts coordinates from the source projection to the target projection
        without checking intermediate or final results. Non-finite values propagate
        to the output.
        """
        lon, lat = self._source.inverse_project_unchecked(x, y)
        return self._target.project_unchecked(lon, lat)

    def invert(self) -> 'ConversionPipe[TARGET_TYPE, SOURCE_TYPE]':
        """Creates a pipe converting in the opposite direction"""
        return ConversionPipe(self._target, self._source)
