"""Shared pseudo-random source, seeded from the clock at import."""

from __future__ import annotations

import random
import time

_generator = random.Random(int(time.time()))


def seed(value: int) -> None:
    """Reseed the shared generator so that later draws are reproducible."""
    _generator.seed(value)


def random_int(low: int, high: int) -> int:
    """Return an integer uniformly drawn from the closed range [low, high]."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return _generator.randint(low, high)


def random_float(low: float, high: float) -> float:
    """Return a float uniformly drawn from the range [low, high)."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    if low == high:
        return low
    value = _generator.uniform(low, high)
    return value if value < high else low