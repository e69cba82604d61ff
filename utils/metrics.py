"""Wall-clock timing for transform steps."""

import time
from typing import List, Tuple


class Timer:
    """Collects per-step runtime in milliseconds."""

    def __init__(self):
        self.timings: List[Tuple[str, float]] = []

    def measure(self, label, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.timings.append((label, (time.perf_counter() - start) * 1000.0))
        return result

    @property
    def last_ms(self) -> float:
        return self.timings[-1][1] if self.timings else 0.0

    @property
    def total_ms(self) -> float:
        return sum(ms for _, ms in self.timings)
