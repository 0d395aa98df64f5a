#!/usr/bin/env python3
"""
Jitter Sources - Small random addend that varies ranking among near-ties.

The scorer takes any zero-argument callable returning a float in [0, 1);
it scales the value by the configured jitter range. Tests pin it with
FixedJitter.
"""

import random
from typing import Callable, Optional

JitterSource = Callable[[], float]


class RandomJitter:
    """Uniform jitter backed by a private random.Random instance."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def __call__(self) -> float:
        return self._rng.random()


class FixedJitter:
    """Always returns the same unit value (0.0 disables jitter)."""

    def __init__(self, value: float = 0.0):
        if not 0.0 <= value < 1.0:
            raise ValueError(f"Jitter value must be in [0, 1), got {value}")
        self.value = value

    def __call__(self) -> float:
        return self.value
