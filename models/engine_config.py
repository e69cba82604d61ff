"""Transform engine configuration."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """Worker pool sizing for the transform engine."""

    num_workers: Optional[int] = None
    min_chunk: int = 4096

    def __post_init__(self):
        if self.num_workers is not None and self.num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {self.num_workers}")
        if self.min_chunk < 1:
            raise ValueError(f"min_chunk must be >= 1, got {self.min_chunk}")

    @property
    def resolved_workers(self) -> int:
        return self.num_workers if self.num_workers is not None else (os.cpu_count() or 1)
