"""Transform error taxonomy."""


class TransformError(ValueError):
    """Base class for failures raised by the transform engine."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidDimensions(TransformError):
    """Width or height is not a positive integer."""


class UnsupportedChannelCount(TransformError):
    """Channel count is outside {1, 3, 4} or too small for the operation."""


class BufferSizeMismatch(TransformError):
    """Pixel byte count disagrees with width * height * channels."""
