from typing import Tuple, TypeVar, Union

import numpy as np
from numpy.typing import ArrayLike


SOURCE_TYPE = TypeVar('SOURCE_TYPE', bound='Projection')
TARGET_TYPE = TypeVar('TARGET_TYPE', bound='Projection')
PROJECTION_TYPE = TypeVar('PROJECTION_TYPE', bound='Projection')

# A single value or an array of values, as returned by the transforms
FLOAT_OR_ARRAY = Union[float, np.ndarray]
COORDINATE_PAIR = Tuple[FLOAT_OR_ARRAY, FLOAT_OR_ARRAY]
COORDINATE_INPUT = Union[float, ArrayLike]
