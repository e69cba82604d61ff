"""Transform commands issued by the driver."""

import re
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Grayscale:
    label = "Grayscale"


@dataclass(frozen=True)
class Invert:
    label = "Invert"


@dataclass(frozen=True)
class Brightness:
    offset: int
    label = "Brightness Adjustment"


@dataclass(frozen=True)
class Blur:
    label = "Gaussian Blur"


@dataclass(frozen=True)
class Resize:
    width: int
    height: int
    label = "Resize"


Command = Union[Grayscale, Invert, Brightness, Blur, Resize]

_SIZE_RE = re.compile(r'^\s*(-?\d+)\s*[xX]\s*(-?\d+)\s*$')


def parse_command(text: str) -> Command:
    """Parse ``grayscale``, ``invert``, ``brightness=N``, ``blur`` or ``resize=WxH``."""
    name, sep, arg = text.strip().partition('=')
    name = name.strip().lower()

    if name in ('grayscale', 'invert', 'blur'):
        if sep:
            raise ValueError(f"'{name}' takes no argument, got {text!r}")
        return {'grayscale': Grayscale, 'invert': Invert, 'blur': Blur}[name]()

    if name == 'brightness':
        try:
            return Brightness(int(arg))
        except ValueError:
            raise ValueError(f"brightness expects an integer offset, got {text!r}") from None

    if name == 'resize':
        match = _SIZE_RE.match(arg)
        if not match:
            raise ValueError(f"resize expects WIDTHxHEIGHT, got {text!r}")
        return Resize(int(match.group(1)), int(match.group(2)))

    raise ValueError(f"Unknown command: {text!r}")
