"""Command dispatch and sequential transform pipeline."""

import logging
from typing import Iterable, Optional

from models.commands import Blur, Brightness, Command, Grayscale, Invert, Resize
from models.pipeline_result import PipelineResult
from models.raster_buffer import RasterBuffer
from engines.blur import blur
from engines.parallel import WorkerPool
from engines.pointwise import brightness, grayscale, invert
from engines.resize import resize
from utils.metrics import Timer

_LOGGER = logging.getLogger(__name__)


def apply_command(
    buffer: RasterBuffer,
    command: Command,
    pool: Optional[WorkerPool] = None,
) -> RasterBuffer:
    """Run one command; the returned buffer replaces ``buffer`` for the caller."""
    if isinstance(command, Grayscale):
        return grayscale(buffer, pool=pool)
    if isinstance(command, Invert):
        return invert(buffer, pool=pool)
    if isinstance(command, Brightness):
        return brightness(buffer, command.offset, pool=pool)
    if isinstance(command, Blur):
        return blur(buffer, pool=pool)
    if isinstance(command, Resize):
        return resize(buffer, command.width, command.height, pool=pool)
    raise TypeError(f"Unknown command: {command!r}")


def run_pipeline(
    buffer: RasterBuffer,
    commands: Iterable[Command],
    pool: Optional[WorkerPool] = None,
) -> PipelineResult:
    """Apply ``commands`` in order, one at a time, timing each step.

    A failing step propagates its error; steps that already ran keep their
    effect on ``buffer``.
    """
    timer = Timer()
    current = buffer
    for command in commands:
        current = timer.measure(command.label, apply_command, current, command, pool)
        _LOGGER.info("%s completed in %.2f ms", command.label, timer.last_ms)
        _LOGGER.debug("Buffer is now %r", current)

    return PipelineResult(buffer=current, timings=timer.timings)
