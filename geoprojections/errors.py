"""
Errors raised while constructing projections or transforming coordinates, along
with the parameter validation helpers shared by every projection constructor
"""

__all__ = [
    'IncorrectParams', 'InverseProjectionImpossible', 'ParamNotFinite',
    'ParamOutOfRange', 'ParamRequired', 'ProjectionError', 'ProjectionImpossible',
    'ensure_finite', 'ensure_within_range', 'unpack_required'
]

import math
from typing import Optional, Tuple


class ProjectionError(ValueError):
    """Base class for all errors raised by geoprojections"""


class ParamNotFinite(ProjectionError):
    """A projection parameter is NaN or infinite"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Projection parameter {name} is not finite')


class ParamRequired(ProjectionError):
    """A required projection parameter was never set"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Parameter {name} must be defined')


class ParamOutOfRange(ProjectionError):
    """A projection parameter lies outside of its permitted range"""

    def __init__(self, name: str, lo: float, hi: float):
        self.name = name
        self.lo = lo
        self.hi = hi
        super().__init__(f'Parameter {name} is out of required range {lo}..{hi}')


class IncorrectParams(ProjectionError):
    """The combination of projection parameters does not define a valid projection"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f'Incorrect projection parameters: {reason}')


class ProjectionImpossible(ProjectionError):
    """Projecting a geographic coordinate produced a non-finite result"""

    def __init__(self, lon: float, lat: float):
        self.lon = lon
        self.lat = lat
        super().__init__(
            f'Attempt to project lon: {lon} lat: {lat} results in not finite result'
        )


class InverseProjectionImpossible(ProjectionError):
    """Inverse projecting a map coordinate produced a non-finite result"""

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        super().__init__(
            f'Attempt to inverse project x: {x} y: {y} results in not finite result'
        )


def unpack_required(name: str, value: Optional[float]) -> float:
    """
    Returns a required parameter's value.

    Args:
        name:
            The parameter name, as reported in the error

        value:
            The parameter value, or None if it was never set

    Returns:
        The parameter value

    Raises:
        ParamRequired: if value is None
    """
    if value is None:
        raise ParamRequired(name)

    return value


def ensure_finite(**params: float) -> None:
    """
    Checks that every keyword argument is a finite number. Parameters are checked in
    the order they were passed, and the first non-finite one is reported.

    Raises:
        ParamNotFinite
    """
    for name, value in params.items():
        if not math.isfinite(value):
            raise ParamNotFinite(name)


def ensure_within_range(name: str, value: float, bounds: Tuple[float, float]) -> None:
    """
    Checks that a parameter lies within the half-open interval [lo, hi).

    Args:
        name:
            The parameter name, as reported in the error

        value:
            The parameter value

        bounds:
            A (lo, hi) tuple; lo is permitted, hi is not

    Raises:
        ParamOutOfRange
    """
    lo, hi = bounds
    if not lo <= value < hi:
        raise ParamOutOfRange(name, lo, hi)
