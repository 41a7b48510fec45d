from __future__ import annotations

import math
import random
from typing import Optional


class DeterministicRng:
    """Seedable random source used only when spawning boids."""

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._random = random.Random(seed)

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_float(self) -> float:
        """Uniform in ``[0, 1)``."""
        return self._random.random()

    def next_angle(self) -> float:
        """Uniform in ``[0, tau)``."""
        return self._random.random() * math.tau
