"""
Chunked, optionally multi-threaded transformation of large coordinate arrays
"""

__all__ = ['convert_batch', 'inverse_project_batch', 'project_batch']

import functools
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

import numpy as np

from geoprojections._base import Projection
from geoprojections._const import DEFAULT_CHUNK_SIZE
from geoprojections._types import COORDINATE_INPUT
from geoprojections.conversion import ConversionPipe
from geoprojections.utils.logging import LOGGER

_TRANSFORM = Callable[[np.ndarray, np.ndarray], Tuple[np.ndarray, np.ndarray]]


def _transform_chunk(
    transform: _TRANSFORM,
    chunk: Tuple[np.ndarray, np.ndarray]
) -> Tuple[np.ndarray, np.ndarray]:
    first, second = transform(*chunk)
    return (
        np.asarray(first, dtype=np.float64).reshape(-1),
        np.asarray(second, dtype=np.float64).reshape(-1)
    )


def _run_batch(
    transform: _TRANSFORM,
    first: COORDINATE_INPUT,
    second: COORDINATE_INPUT,
    max_workers: Optional[int],
    chunk_size: int,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Splits the broadcast inputs into chunks, applies the transform to each chunk and
    reassembles the results in input order.

    Chunks are processed in order and, with more than one worker, concurrently. A
    transform raising for one chunk propagates from the earliest failing chunk.
    """
    if chunk_size <= 0:
        raise ValueError(f'chunk_size must be positive, got {chunk_size}')

    if max_workers is not None and max_workers <= 0:
        raise ValueError(f'max_workers must be positive, got {max_workers}')

    first, second = np.broadcast_arrays(
        np.asarray(first, dtype=np.float64), np.asarray(second, dtype=np.float64)
    )
    shape = first.shape
    flat_first, flat_second = first.reshape(-1), second.reshape(-1)

    chunks: List[Tuple[np.ndarray, np.ndarray]] = [
        (flat_first[i:i + chunk_size], flat_second[i:i + chunk_size])
        for i in range(0, flat_first.size, chunk_size)
    ]
    func = functools.partial(_transform_chunk, transform)

    if max_workers is not None and max_workers > 1 and len(chunks) > 1:
        LOGGER.debug(
            'Transforming %d points in %d chunks on %d threads',
            flat_first.size, len(chunks), max_workers
        )
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            # map() yields in submission order, so the earliest failing chunk raises
            results = list(pool.map(func, chunks))
    else:
        LOGGER.debug('Transforming %d points in %d chunks', flat_first.size, len(chunks))
        results = [func(chunk) for chunk in chunks]

    if not results:
        return np.empty(shape, dtype=np.float64), np.empty(shape, dtype=np.float64)

    out_first = np.concatenate([res[0] for res in results]).reshape(shape)
    out_second = np.concatenate([res[1] for res in results]).reshape(shape)

    if LOGGER.isEnabledFor(logging.DEBUG):
        nonfinite = int(np.count_nonzero(~(np.isfinite(out_first) & np.isfinite(out_second))))
        if nonfinite:
            LOGGER.debug('%d of %d transformed points are not finite', nonfinite, flat_first.size)

    return out_first, out_second


def project_batch(
    projection: Projection,
    lons: COORDINATE_INPUT,
    lats: COORDINATE_INPUT,
    checked: bool = True,
    max_workers: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Projects a large number of geographic coordinates.

    Args:
        projection:
            The projection to apply

        lons:
            Longitudes, in degrees

        lats:
            Latitudes, in degrees. Must be broadcastable against lons.

        checked: (Default True)
            Whether to raise on non-finite results. When False, non-finite values
            are returned in place.

        max_workers: (Default None)
            Number of threads to spread chunks across. None or 1 processes chunks
            sequentially on the calling thread.

        chunk_size: (Default 4096)
            Number of points transformed per chunk

    Returns:
        (x, y) as float64 arrays shaped like the broadcast input

    Raises:
        ProjectionImpossible: (checked only) for the first point, in input order,
            that could not be projected
        ValueError: chunk_size or max_workers is not positive
    """
    transform = projection.project if checked else projection.project_unchecked
    return _run_batch(transform, lons, lats, max_workers, chunk_size)


def inverse_project_batch(
    projection: Projection,
    xs: COORDINATE_INPUT,
    ys: COORDINATE_INPUT,
    checked: bool = True,
    max_workers: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Inverse projects a large number of map coordinates. Arguments and behavior
    mirror project_batch().

    Returns:
        (longitude, latitude) in degrees, as float64 arrays

    Raises:
        InverseProjectionImpossible: (checked only) for the first point, in input
            order, that could not be inverse projected
        ValueError: chunk_size or max_workers is not positive
    """
    transform = projection.inverse_project if checked else projection.inverse_project_unchecked
    return _run_batch(transform, xs, ys, max_workers, chunk_size)


def convert_batch(
    pipe: ConversionPipe,
    xs: COORDINATE_INPUT,
    ys: COORDINATE_INPUT,
    checked: bool = True,
    max_workers: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Converts a large number of coordinates through a ConversionPipe. Arguments and
    behavior mirror project_batch().

    Returns:
        (x, y) in the pipe's target projection, as float64 arrays

    Raises:
        InverseProjectionImpossible, ProjectionImpossible: (checked only) for the
            earliest chunk containing a point that could not be converted. Within
            that chunk, a point failing the inverse projection is reported ahead of
            an earlier point failing only the forward projection.
        ValueError: chunk_size or max_workers is not positive
    """
    transform = pipe.convert if checked else pipe.convert_unchecked
    return _run_batch(transform, xs, ys, max_workers, chunk_size)
