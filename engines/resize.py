"""Nearest-neighbor resize."""

import operator
from typing import Optional

import numpy as np

from models.errors import InvalidDimensions
from models.raster_buffer import RasterBuffer
from engines.parallel import WorkerPool, get_default_pool


def source_indices(old: int, new: int) -> np.ndarray:
    """floor(i * old / new) for every output index i."""
    return (np.arange(new, dtype=np.int64) * old) // new


def resize(
    buffer: RasterBuffer,
    new_w: int,
    new_h: int,
    pool: Optional[WorkerPool] = None,
) -> RasterBuffer:
    """Return a new buffer of ``new_w`` x ``new_h``; the input is not modified.

    Sampling truncates toward the lower-index source pixel rather than
    rounding to the nearest one.
    """
    try:
        new_w = operator.index(new_w)
        new_h = operator.index(new_h)
    except TypeError:
        raise InvalidDimensions(f"Target size must be integers, got {new_w!r}x{new_h!r}") from None
    if new_w <= 0 or new_h <= 0:
        raise InvalidDimensions(f"Target size must be positive, got {new_w}x{new_h}")
    buffer.validate()
    pool = pool or get_default_pool()

    src = buffer.as_array()
    src_x = source_indices(buffer.width, new_w)
    src_y = source_indices(buffer.height, new_h)
    out = np.empty((new_h, new_w, buffer.channels), dtype=np.uint8)

    def kernel(lo: int, hi: int) -> None:
        out[lo:hi] = src[src_y[lo:hi]][:, src_x]

    pool.map_ranges(0, new_h, kernel, unit_cost=new_w * buffer.channels)
    return RasterBuffer(out.reshape(-1), new_w, new_h, buffer.channels)
