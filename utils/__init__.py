"""Shared utilities."""

from .metrics import Timer
from .test_images import (
    DEMO_IMAGES,
    generate_colored_checkerboard,
    generate_thin_stripes,
    generate_gradient,
    generate_demo_image,
)
from .image_io import load_image, save_image
from .logging import get_logger, configure_engine_logging

__all__ = [
    'Timer',
    'DEMO_IMAGES',
    'generate_colored_checkerboard',
    'generate_thin_stripes',
    'generate_gradient',
    'generate_demo_image',
    'load_image',
    'save_image',
    'get_logger',
    'configure_engine_logging',
]
