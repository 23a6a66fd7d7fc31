"""Module for miscellaneous multi-use functions"""

__all__ = [
    'approx_eq', 'as_float_or_array', 'first_nonfinite'
]

import math
from typing import Optional, Tuple

import numpy as np

from geoprojections._const import FLOAT_EPSILON, FLOAT_ULPS
from geoprojections._types import FLOAT_OR_ARRAY


def approx_eq(a: float, b: float) -> bool:
    """
    Tests two floats for equality, allowing for accumulated rounding error.

    Values are considered equal when they differ by no more than machine epsilon,
    or by no more than a few units in the last place of the larger value.

    Args:
        a:
            A float

        b:
            A second float

    Returns:
        bool
    """
    diff = abs(a - b)
    if diff <= FLOAT_EPSILON:
        return True

    return diff <= FLOAT_ULPS * math.ulp(max(abs(a), abs(b)))


def as_float_or_array(value) -> FLOAT_OR_ARRAY:
    """
    Normalizes a transform output: 0-dimensional results become python floats,
    anything else is returned as a float64 numpy array.
    """
    arr = np.array(value, dtype=np.float64)
    if arr.ndim == 0:
        return float(arr)

    return arr


def first_nonfinite(
    first: FLOAT_OR_ARRAY,
    second: FLOAT_OR_ARRAY
) -> Optional[Tuple[int, ...]]:
    """
    Locates the first position (in C order) at which either of two broadcastable
    values is NaN or infinite.

    Args:
        first:
            A float or array

        second:
            A float or array, broadcastable against `first`

    Returns:
        The index tuple of the first non-finite element (an empty tuple for
        scalar values), or None if every element is finite.
    """
    bad = ~(np.isfinite(first) & np.isfinite(second))
    if not np.any(bad):
        return None

    if np.ndim(bad) == 0:
        return ()

    return np.unravel_index(int(np.argmax(bad)), np.shape(bad))
