"""
Base class declarations for geoprojections
"""

from __future__ import annotations

__all__ = ['Projection', 'ProjectionBuilder']

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Tuple, Type, TYPE_CHECKING

import numpy as np
from typing_extensions import Self

from geoprojections._types import (
    COORDINATE_INPUT, COORDINATE_PAIR, PROJECTION_TYPE, TARGET_TYPE
)
from geoprojections.errors import InverseProjectionImpossible, ProjectionImpossible
from geoprojections.utils.functions import as_float_or_array, first_nonfinite
from geoprojections.utils.logging import log_transform

if TYPE_CHECKING:  # pragma: no cover
    from geoprojections.conversion import ConversionPipe


def _element(value: Any, index: Tuple[int, ...], shape: Tuple[int, ...]) -> float:
    """Pulls a single float out of a (possibly broadcast) transform input"""
    return float(np.broadcast_to(np.asarray(value, dtype=np.float64), shape)[index])


class Projection(ABC):
    """
    The interface shared by every map projection.

    Subclasses implement the forward and inverse transforms in _project() and
    _inverse_project(), which receive float64 numpy arrays and must only use
    numpy operations (so that scalars and arrays are handled alike, and invalid
    input yields NaN rather than raising). The public transforms are provided here.

    Projections are immutable values: every constant a transform depends on is
    computed once by the constructor, so a single instance may be shared freely
    between threads.
    """

    def __eq__(self, other):
        if type(self) is not type(other):
            return False

        return self._parameters() == other._parameters()

    def __hash__(self):
        return hash((type(self).__name__, tuple(self._parameters().items())))

    def __repr__(self):
        params = ', '.join(f'{k}={v!r}' for k, v in self._parameters().items())
        return f'<{type(self).__name__}({params})>'

    @abstractmethod
    def _parameters(self) -> Dict[str, Any]:
        """The parameters which define this projection, keyed by name"""

    @abstractmethod
    def _project(self, lon: np.ndarray, lat: np.ndarray) -> Tuple[Any, Any]:
        """Forward transform of longitudes and latitudes, in degrees"""

    @abstractmethod
    def _inverse_project(self, x: np.ndarray, y: np.ndarray) -> Tuple[Any, Any]:
        """Inverse transform of map coordinates"""

    def project_unchecked(self, lon: COORDINATE_INPUT, lat: COORDINATE_INPUT) -> COORDINATE_PAIR:
        """
        Projects geographic coordinates to map coordinates without checking the result.
        Input outside of the projection's domain produces NaN or infinite values.

        Args:
            lon:
                Longitude(s), in degrees. A float or anything numpy can turn into an array.

            lat:
                Latitude(s), in degrees. Must be broadcastable against lon.

        Returns:
            (x, y), as floats for scalar input or as numpy arrays otherwise
        """
        lon, lat = np.broadcast_arrays(
            np.asarray(lon, dtype=np.float64), np.asarray(lat, dtype=np.float64)
        )
        with np.errstate(all='ignore'):
            x, y = self._project(lon, lat)

        return as_float_or_array(x), as_float_or_array(y)

    def inverse_project_unchecked(self, x: COORDINATE_INPUT, y: COORDINATE_INPUT) -> COORDINATE_PAIR:
        """
        Inverse projects map coordinates to geographic coordinates without checking the
        result. Input outside of the projection's range produces NaN or infinite values.

        Args:
            x:
                Map x coordinate(s). A float or anything numpy can turn into an array.

            y:
                Map y coordinate(s). Must be broadcastable against x.

        Returns:
            (longitude, latitude) in degrees, as floats for scalar input or as
            numpy arrays otherwise
        """
        x, y = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)
        )
        with np.errstate(all='ignore'):
            lon, lat = self._inverse_project(x, y)

        return as_float_or_array(lon), as_float_or_array(lat)

    @log_transform
    def project(self, lon: COORDINATE_INPUT, lat: COORDINATE_INPUT) -> COORDINATE_PAIR:
        """
        Projects geographic coordinates (in degrees) to map coordinates.

        Args:
            lon:
                Longitude(s), in degrees

            lat:
                Latitude(s), in degrees

        Returns:
            (x, y)

        Raises:
            ProjectionImpossible: if any resulting value is not finite. For array
                input, the first offending coordinate pair is reported.
        """
        x, y = self.project_unchecked(lon, lat)
        index = first_nonfinite(x, y)
        if index is not None:
            shape = np.shape(x)
            raise ProjectionImpossible(
                _element(lon, index, shape), _element(lat, index, shape)
            )

        return x, y

    @log_transform
    def inverse_project(self, x: COORDINATE_INPUT, y: COORDINATE_INPUT) -> COORDINATE_PAIR:
        """
        Inverse projects map coordinates to geographic coordinates (in degrees).

        Args:
            x:
                Map x coordinate(s)

            y:
                Map y coordinate(s)

        Returns:
            (longitude, latitude)

        Raises:
            InverseProjectionImpossible: if any resulting value is not finite. For
                array input, the first offending coordinate pair is reported.
        """
        lon, lat = self.inverse_project_unchecked(x, y)
        index = first_nonfinite(lon, lat)
        if index is not None:
            shape = np.shape(lon)
            raise InverseProjectionImpossible(
                _element(x, index, shape), _element(y, index, shape)
            )

        return lon, lat

    def pipe_to(self, target: TARGET_TYPE) -> 'ConversionPipe[Self, TARGET_TYPE]':
        """
        Creates a ConversionPipe from this projection to another. No coordinates are
        transformed until the pipe is used.

        Args:
            target:
                The projection coordinates will be converted into

        Returns:
            ConversionPipe
        """
        from geoprojections.conversion import ConversionPipe  # pylint: disable=import-outside-toplevel
        return ConversionPipe(self, target)


class ProjectionBuilder(Generic[PROJECTION_TYPE]):
    """
    Collects the parameters of a projection, then validates them and constructs the
    projection with initialize_projection().

    Builders are mutable and may be reused; every call to initialize_projection()
    creates a new, independent projection from the parameters set at that moment.
    Parameters left unset fall back to the projection's defaults (or, for required
    parameters, fail validation).
    """

    _projection_type: Type[PROJECTION_TYPE]

    def __init__(self):
        self._params: Dict[str, Any] = {}

    def __repr__(self):
        params = ', '.join(f'{k}={v!r}' for k, v in self._params.items())
        return f'<{type(self).__name__}({params})>'

    def _set(self, **params) -> Self:
        self._params.update(params)
        return self

    def initialize_projection(self) -> PROJECTION_TYPE:
        """
        Validates the collected parameters and constructs the projection.

        Derived constants are computed once here, so construction can be comparatively
        expensive; when projecting many coordinates, create one projection and reuse it.

        Returns:
            The projection

        Raises:
            ParamRequired: a required parameter was never set
            ParamNotFinite: a parameter is NaN or infinite
            ParamOutOfRange: a longitude or latitude lies outside its valid range
            IncorrectParams: the parameters do not define a valid projection
        """
        return self._projection_type(**self._params)
