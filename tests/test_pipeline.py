"""Tests for command parsing and the transform pipeline."""

import numpy as np
import pytest
from engines.pipeline import apply_command, run_pipeline
from models.commands import Blur, Brightness, Grayscale, Invert, Resize, parse_command
from models.errors import InvalidDimensions
from models.raster_buffer import RasterBuffer


@pytest.mark.parametrize("text,expected", [
    ("grayscale", Grayscale()),
    ("INVERT", Invert()),
    ("blur", Blur()),
    ("brightness=25", Brightness(25)),
    ("brightness=-100", Brightness(-100)),
    ("resize=640x480", Resize(640, 480)),
    ("resize = 3X2", Resize(3, 2)),
])
def test_parse_command(text, expected):
    assert parse_command(text) == expected


@pytest.mark.parametrize("text", ["sharpen", "brightness", "brightness=abc", "resize=10", "invert=3", ""])
def test_parse_command_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_command(text)


def test_apply_command_dispatch(pool):
    buf = RasterBuffer(np.array([10, 20, 30, 40], dtype=np.uint8), 2, 2, 1)
    assert apply_command(buf, Invert(), pool=pool) is buf
    assert buf.pixels.tolist() == [245, 235, 225, 215]
    resized = apply_command(buf, Resize(1, 1), pool=pool)
    assert resized.pixels.tolist() == [245]


def test_apply_command_unknown():
    buf = RasterBuffer(np.zeros(1, dtype=np.uint8), 1, 1, 1)
    with pytest.raises(TypeError):
        apply_command(buf, "blur")


def test_run_pipeline_applies_in_order(pool):
    """Later steps see earlier results; resize replaces the buffer."""
    buf = RasterBuffer(np.full(4 * 4 * 3, 100, dtype=np.uint8), 4, 4, 3)
    commands = [Brightness(50), Grayscale(), Blur(), Resize(2, 3), Invert()]
    result = run_pipeline(buf, commands, pool=pool)

    assert (result.buffer.width, result.buffer.height) == (2, 3)
    assert np.all(result.buffer.pixels == 255 - 150)
    assert [label for label, _ in result.timings] == [c.label for c in commands]
    assert all(ms >= 0 for _, ms in result.timings)
    assert result.total_ms == pytest.approx(sum(ms for _, ms in result.timings))


def test_run_pipeline_propagates_errors(pool):
    buf = RasterBuffer(np.zeros(4, dtype=np.uint8), 2, 2, 1)
    with pytest.raises(InvalidDimensions):
        run_pipeline(buf, [Resize(0, 1)], pool=pool)


def test_run_pipeline_uses_default_pool():
    buf = RasterBuffer(np.zeros(3, dtype=np.uint8), 1, 1, 3)
    result = run_pipeline(buf, [Invert()])
    assert result.buffer.pixels.tolist() == [255, 255, 255]
