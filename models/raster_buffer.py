"""Raster buffer: flat 8-bit pixels plus their geometry."""

from dataclasses import dataclass
import numpy as np

from models.errors import BufferSizeMismatch, InvalidDimensions, UnsupportedChannelCount

SUPPORTED_CHANNELS = (1, 3, 4)


@dataclass(eq=False)
class RasterBuffer:
    """Row-major, pixel-major, channel-minor uint8 image.

    Byte ``(y * width + x) * channels + c`` holds channel ``c`` of pixel
    ``(x, y)``. ``pixels`` is always a flat C-contiguous array.
    """

    pixels: np.ndarray
    width: int
    height: int
    channels: int

    def __post_init__(self):
        self.pixels = np.ascontiguousarray(self.pixels, dtype=np.uint8).reshape(-1)
        self.validate()

    def validate(self) -> None:
        """Raise if the metadata or the pixel count is inconsistent."""
        for name in ('width', 'height'):
            value = getattr(self, name)
            if not isinstance(value, (int, np.integer)) or value <= 0:
                raise InvalidDimensions(f"{name} must be a positive integer, got {value!r}")
        if self.channels not in SUPPORTED_CHANNELS:
            raise UnsupportedChannelCount(
                f"Channels must be one of {SUPPORTED_CHANNELS}, got {self.channels!r}"
            )
        if self.pixels.dtype != np.uint8:
            raise TypeError(f"Expected uint8 pixels, got {self.pixels.dtype}")
        expected = self.width * self.height * self.channels
        if self.pixels.ndim != 1 or self.pixels.size != expected:
            raise BufferSizeMismatch(
                f"Expected {expected} bytes for {self.width}x{self.height}x{self.channels}, "
                f"got {self.pixels.size}"
            )

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'RasterBuffer':
        """Build from an (H, W) or (H, W, C) uint8 array."""
        array = np.asarray(array)
        if array.ndim == 2:
            height, width = array.shape
            channels = 1
        elif array.ndim == 3:
            height, width, channels = array.shape
        else:
            raise InvalidDimensions(f"Expected a 2D or 3D array, got shape {array.shape}")
        if array.dtype != np.uint8:
            raise TypeError(f"Expected uint8 pixels, got {array.dtype}")
        return cls(array.copy().reshape(-1), int(width), int(height), int(channels))

    def as_array(self) -> np.ndarray:
        """(H, W, C) view sharing memory with ``pixels``."""
        return self.pixels.reshape(self.height, self.width, self.channels)

    def copy(self) -> 'RasterBuffer':
        return RasterBuffer(self.pixels.copy(), self.width, self.height, self.channels)

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def nbytes(self) -> int:
        return self.size * self.channels

    def __eq__(self, other):
        if not isinstance(other, RasterBuffer):
            return NotImplemented
        return (
            (self.width, self.height, self.channels) == (other.width, other.height, other.channels)
            and np.array_equal(self.pixels, other.pixels)
        )

    def __repr__(self):
        return f"RasterBuffer({self.width}x{self.height}x{self.channels})"
