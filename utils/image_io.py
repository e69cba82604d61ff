"""Image I/O using OpenCV."""

from pathlib import Path

import cv2
import numpy as np

from models.raster_buffer import RasterBuffer, SUPPORTED_CHANNELS


def load_image(path: str) -> RasterBuffer:
    """Load image as uint8 gray, RGB or RGBA, keeping its channel count."""
    img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")

    if img.dtype == np.uint16:
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        raise ValueError(f"Unsupported pixel type {img.dtype} in {path}")

    channels = 1 if img.ndim == 2 else img.shape[2]
    if channels not in SUPPORTED_CHANNELS:
        raise ValueError(f"Unsupported channel count {channels} in {path}")
    if channels == 3:
        img = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    elif channels == 4:
        img = cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)

    return RasterBuffer.from_array(img)


def save_image(buffer: RasterBuffer, path: str, quality: int = 100) -> None:
    """Save buffer, creating the parent directory if needed."""
    buffer.validate()
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    is_jpeg = target.suffix.lower() in ('.jpg', '.jpeg')
    img = buffer.as_array()
    if buffer.channels == 1:
        img = img[:, :, 0]
    elif buffer.channels == 3:
        img = cv2.cvtColor(img, cv2.COLOR_RGB2BGR)
    elif is_jpeg:
        # JPEG has no alpha plane
        img = cv2.cvtColor(img, cv2.COLOR_RGBA2BGR)
    else:
        img = cv2.cvtColor(img, cv2.COLOR_RGBA2BGRA)

    params = [cv2.IMWRITE_JPEG_QUALITY, int(quality)] if is_jpeg else []
    if not cv2.imwrite(str(target), img, params):
        raise IOError(f"Could not save image to {path}")
