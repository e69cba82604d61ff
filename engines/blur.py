"""3x3 Gaussian blur over interior pixels."""

import logging
from typing import Optional

import numpy as np

from models.raster_buffer import RasterBuffer
from engines.parallel import WorkerPool, get_default_pool

_LOGGER = logging.getLogger(__name__)

# [1 2 1; 2 4 2; 1 2 1] / 16
GAUSSIAN_KERNEL_3X3 = np.array(
    [[1, 2, 1],
     [2, 4, 2],
     [1, 2, 1]],
    dtype=np.uint16,
)
KERNEL_SHIFT = 4


def blur(buffer: RasterBuffer, pool: Optional[WorkerPool] = None) -> RasterBuffer:
    """Blur in place, leaving the outermost ring of pixels unchanged.

    Reads come from a frozen copy of the input so that already-written
    neighbours never feed back into the stencil. The weighted sum is
    truncated, matching an 8-bit cast of the normalized float sum.
    """
    buffer.validate()
    width, height, channels = buffer.width, buffer.height, buffer.channels
    if width < 3 or height < 3:
        _LOGGER.debug("No interior pixels in %r; blur skipped", buffer)
        return buffer
    pool = pool or get_default_pool()

    live = buffer.as_array()
    # Widened copy so weighted terms never wrap at 8 bits
    snapshot = live.astype(np.uint16)
    snapshot.flags.writeable = False

    def kernel(lo: int, hi: int) -> None:
        acc = np.zeros((hi - lo, width - 2, channels), dtype=np.uint16)
        for ky in range(3):
            for kx in range(3):
                window = snapshot[lo - 1 + ky:hi - 1 + ky, kx:width - 2 + kx]
                acc += GAUSSIAN_KERNEL_3X3[ky, kx] * window
        live[lo:hi, 1:width - 1] = np.minimum(acc >> KERNEL_SHIFT, 255).astype(np.uint8)

    pool.map_ranges(1, height - 1, kernel, unit_cost=width * channels)
    return buffer
