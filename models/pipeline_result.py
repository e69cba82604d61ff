"""Result of running a command sequence."""

from dataclasses import dataclass, field
from typing import List, Tuple

from .raster_buffer import RasterBuffer


@dataclass
class PipelineResult:
    """Final buffer plus per-step runtime."""

    buffer: RasterBuffer
    timings: List[Tuple[str, float]] = field(default_factory=list)

    @property
    def total_ms(self) -> float:
        return sum(ms for _, ms in self.timings)
