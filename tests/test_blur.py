"""Tests for the 3x3 Gaussian blur."""

import numpy as np
import pytest
from engines.blur import blur
from models.raster_buffer import RasterBuffer


def _single_channel(rows):
    arr = np.array(rows, dtype=np.uint8)
    return RasterBuffer.from_array(arr)


def test_center_weight(pool):
    """A lone bright center contributes 4/16 of its value."""
    buf = _single_channel([[0, 0, 0], [0, 160, 0], [0, 0, 0]])
    blur(buf, pool=pool)
    assert buf.as_array()[1, 1, 0] == 40


def test_result_is_truncated(pool):
    """Corner 15 contributes 15/16 -> 0, not rounded to 1."""
    buf = _single_channel([[15, 0, 0], [0, 0, 0], [0, 0, 0]])
    blur(buf, pool=pool)
    assert buf.as_array()[1, 1, 0] == 0


def test_reads_from_snapshot(pool):
    """Neighbours see pre-blur values even after earlier pixels are written."""
    rows = [[0, 0, 0, 0], [0, 160, 0, 0], [0, 0, 0, 0]]
    buf = _single_channel(rows)
    blur(buf, pool=pool)
    # (1,2) sees the original 160 at (1,1) with weight 2/16
    assert buf.as_array()[1, 1, 0] == 40
    assert buf.as_array()[1, 2, 0] == 20


@pytest.mark.parametrize("width,height,channels", [(3, 3, 1), (7, 5, 3), (16, 9, 4)])
def test_border_untouched(pool, random_buffer, width, height, channels):
    """The outermost ring equals the input on all four edges."""
    original = random_buffer(width, height, channels, seed=width)
    buf = blur(original.copy(), pool=pool)
    before, after = original.as_array(), buf.as_array()
    assert np.array_equal(after[0], before[0])
    assert np.array_equal(after[-1], before[-1])
    assert np.array_equal(after[:, 0], before[:, 0])
    assert np.array_equal(after[:, -1], before[:, -1])


@pytest.mark.parametrize("value", [200, 255])
def test_bright_values_do_not_wrap(pool, value):
    """4 * 200 exceeds a byte; the weighted sum must stay exact."""
    buf = _single_channel([[value] * 3] * 3)
    blur(buf, pool=pool)
    assert buf.as_array()[1, 1, 0] == value


def test_uniform_buffer_is_noop(pool):
    buf = RasterBuffer(np.full(12 * 10 * 3, 173, dtype=np.uint8), 12, 10, 3)
    blur(buf, pool=pool)
    assert np.all(buf.pixels == 173)


def test_matches_float_reference(pool, random_buffer):
    """Integer kernel equals truncating the normalized float sum."""
    original = random_buffer(13, 11, 3, seed=5)
    src = original.as_array().astype(np.float64)
    kernel = np.array([[1, 2, 1], [2, 4, 2], [1, 2, 1]]) / 16.0
    expected = original.as_array().copy()
    for y in range(1, 10):
        for x in range(1, 12):
            window = src[y - 1:y + 2, x - 1:x + 2]
            expected[y, x] = np.einsum('ij,ijc->c', kernel, window).astype(np.uint8)
    buf = blur(original.copy(), pool=pool)
    assert np.array_equal(buf.as_array(), expected)


@pytest.mark.parametrize("width,height", [(2, 5), (5, 2), (1, 1)])
def test_no_interior_is_noop(pool, random_buffer, width, height):
    original = random_buffer(width, height, 3)
    assert blur(original.copy(), pool=pool) == original


def test_parallel_matches_serial(pool, serial_pool, random_buffer):
    parallel = blur(random_buffer(50, 41, 4, seed=2), pool=pool)
    serial = blur(random_buffer(50, 41, 4, seed=2), pool=serial_pool)
    assert parallel == serial
