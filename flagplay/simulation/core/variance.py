"""Randomness used by the simulation.

All stochastic decisions (throw noise, catch roll, flag pull) draw from a
RandomSource owned by the Simulation. Passing a seeded source makes a
play fully reproducible.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1)."""

    def random(self) -> float:
        ...


def make_random_source(seed: Optional[int] = None) -> random.Random:
    """Create an independent random source, seeded when a seed is given."""
    return random.Random(seed)


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value between min and max."""
    return max(min_val, min(max_val, value))


def centered_noise(rng: RandomSource, amplitude: float) -> float:
    """Uniform noise in [-amplitude/2, amplitude/2)."""
    return (rng.random() - 0.5) * amplitude
