"""Elementwise transforms: grayscale, invert, brightness.

Every output byte depends only on bytes of the same pixel, so the pixel (or
byte) index range is split across the worker pool with no synchronization.
"""

import operator
from typing import Optional

import numpy as np

from models.errors import UnsupportedChannelCount
from models.raster_buffer import RasterBuffer
from engines.parallel import WorkerPool, get_default_pool

# Luma weights in percent: 0.30 R + 0.59 G + 0.11 B
LUMA_WEIGHTS = (30, 59, 11)


def grayscale(buffer: RasterBuffer, pool: Optional[WorkerPool] = None) -> RasterBuffer:
    """Replace RGB with truncated luma in place; alpha is left untouched."""
    buffer.validate()
    if buffer.channels < 3:
        raise UnsupportedChannelCount(
            f"Grayscale needs at least 3 channels, got {buffer.channels}"
        )
    pool = pool or get_default_pool()
    px = buffer.pixels.reshape(buffer.size, buffer.channels)
    wr, wg, wb = LUMA_WEIGHTS

    def kernel(lo: int, hi: int) -> None:
        rgb = px[lo:hi, :3].astype(np.uint32)
        # Integer form is exact, so re-applying to gray pixels is a no-op
        gray = (wr * rgb[:, 0] + wg * rgb[:, 1] + wb * rgb[:, 2]) // 100
        px[lo:hi, :3] = gray.astype(np.uint8)[:, None]

    pool.map_ranges(0, buffer.size, kernel, unit_cost=buffer.channels)
    return buffer


def invert(buffer: RasterBuffer, pool: Optional[WorkerPool] = None) -> RasterBuffer:
    """Every byte, alpha included, becomes 255 - byte."""
    buffer.validate()
    pool = pool or get_default_pool()
    flat = buffer.pixels

    def kernel(lo: int, hi: int) -> None:
        segment = flat[lo:hi]
        np.subtract(255, segment, out=segment)

    pool.map_ranges(0, flat.size, kernel)
    return buffer


def brightness(
    buffer: RasterBuffer,
    offset: int,
    pool: Optional[WorkerPool] = None,
) -> RasterBuffer:
    """Add ``offset`` to every byte with saturation at 0 and 255."""
    offset = operator.index(offset)
    buffer.validate()
    pool = pool or get_default_pool()
    flat = buffer.pixels
    # Anything beyond +-255 saturates identically
    offset = max(-255, min(255, offset))
    if offset == 0:
        return buffer

    def kernel(lo: int, hi: int) -> None:
        segment = flat[lo:hi]
        shifted = segment.astype(np.int16) + np.int16(offset)
        segment[:] = np.clip(shifted, 0, 255).astype(np.uint8)

    pool.map_ranges(0, flat.size, kernel)
    return buffer
