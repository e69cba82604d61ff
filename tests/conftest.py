import numpy as np
import pytest

from engines.parallel import WorkerPool
from models.engine_config import EngineConfig
from models.raster_buffer import RasterBuffer


@pytest.fixture
def pool():
    """Multi-threaded pool that splits even tiny ranges."""
    with WorkerPool(EngineConfig(num_workers=4, min_chunk=1)) as p:
        yield p


@pytest.fixture
def serial_pool():
    with WorkerPool(EngineConfig(num_workers=1)) as p:
        yield p


@pytest.fixture
def random_buffer():
    """Factory for reproducible noise buffers."""
    def make(width, height, channels, seed=0):
        rng = np.random.default_rng(seed)
        pixels = rng.integers(0, 256, width * height * channels, dtype=np.uint8)
        return RasterBuffer(pixels, width, height, channels)
    return make
