"""Transform engine - pure computation on raster buffers, no I/O."""

from models.errors import (
    TransformError,
    InvalidDimensions,
    UnsupportedChannelCount,
    BufferSizeMismatch,
)
from .parallel import WorkerPool, split_range, get_default_pool
from .pointwise import grayscale, invert, brightness
from .blur import blur
from .resize import resize
from .pipeline import apply_command, run_pipeline

__all__ = [
    'TransformError',
    'InvalidDimensions',
    'UnsupportedChannelCount',
    'BufferSizeMismatch',
    'WorkerPool',
    'split_range',
    'get_default_pool',
    'grayscale',
    'invert',
    'brightness',
    'blur',
    'resize',
    'apply_command',
    'run_pipeline',
]
