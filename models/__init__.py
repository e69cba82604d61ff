"""Data models for raster buffers, commands and engine settings."""

from .errors import TransformError, InvalidDimensions, UnsupportedChannelCount, BufferSizeMismatch
from .raster_buffer import RasterBuffer, SUPPORTED_CHANNELS
from .engine_config import EngineConfig
from .pipeline_result import PipelineResult
from .commands import Grayscale, Invert, Brightness, Blur, Resize, Command, parse_command

__all__ = [
    'TransformError',
    'InvalidDimensions',
    'UnsupportedChannelCount',
    'BufferSizeMismatch',
    'RasterBuffer',
    'SUPPORTED_CHANNELS',
    'EngineConfig',
    'PipelineResult',
    'Grayscale',
    'Invert',
    'Brightness',
    'Blur',
    'Resize',
    'Command',
    'parse_command',
]
