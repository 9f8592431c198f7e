"""Uniform samplers, including linear-interpolation sampling of Rgb24.

Sampling a colour between low and high does NOT draw each channel
independently. One byte t in [0, 255] is drawn and the result is
low.linear_interpolate(high, t), so every sample lies on the straight line
from low to high rather than anywhere in the enclosing RGB box:

    low=(0, 0, 0), high=(255, 255, 255)  ->  always a grey

Samplers borrow a numpy Generator for the duration of one call and never
keep it. Pass your own generator for reproducible draws; otherwise
default_rng() hands out one process-wide Generator seeded from OS entropy.

Example:
    rng = numpy.random.default_rng(7)
    sampler = UniformRgb24LinearInterpolate(rgb24(10, 0, 0), rgb24(200, 100, 50))
    colour = sampler.sample(rng)
"""

from __future__ import annotations

import logging

import numpy as np

from rgb24.core.types import CHANNEL_MAX, CHANNEL_MIN, Rgb24

logger = logging.getLogger(__name__)

_shared_rng: np.random.Generator | None = None


def default_rng() -> np.random.Generator:
    """Return the process-wide Generator, creating it on first use."""
    global _shared_rng
    if _shared_rng is None:
        logger.debug('creating shared entropy-seeded generator')
        _shared_rng = np.random.default_rng()
    return _shared_rng


class UniformInt:
    """Uniform integers in the half-open range [low, high)."""

    def __init__(self, low: int, high: int):
        if low >= high:
            raise ValueError(f'UniformInt needs low < high, got [{low}, {high})')
        self.low = low
        self.high = high

    @classmethod
    def new_inclusive(cls, low: int, high: int) -> UniformInt:
        """Uniform integers in the closed range [low, high]."""
        return cls(low, high + 1)

    def sample(self, rng: np.random.Generator) -> int:
        return int(rng.integers(self.low, self.high))

    def sample_n(self, rng: np.random.Generator, n: int) -> list[int]:
        return [int(v) for v in rng.integers(self.low, self.high, size=n)]


class UniformFloat:
    """Uniform floats in [low, high)."""

    def __init__(self, low: float, high: float):
        if not low < high:
            raise ValueError(f'UniformFloat needs low < high, got [{low}, {high})')
        self.low = low
        self.high = high

    @classmethod
    def new_inclusive(cls, low: float, high: float) -> UniformFloat:
        # The closed and half-open float ranges differ by one ulp; treat them alike.
        return cls(low, high)

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.uniform(self.low, self.high))

    def sample_n(self, rng: np.random.Generator, n: int) -> list[float]:
        return [float(v) for v in rng.uniform(self.low, self.high, size=n)]


class UniformRgb24LinearInterpolate:
    """Uniform colours on the line from low to high.

    low and high may be given in either order and may be equal; both
    endpoints are reachable.
    """

    def __init__(self, low: Rgb24, high: Rgb24):
        if not isinstance(low, Rgb24) or not isinstance(high, Rgb24):
            raise TypeError('UniformRgb24LinearInterpolate bounds must both be Rgb24')
        self.inner = UniformInt.new_inclusive(CHANNEL_MIN, CHANNEL_MAX)
        self.low = low
        self.high = high

    @classmethod
    def new_inclusive(cls, low: Rgb24, high: Rgb24) -> UniformRgb24LinearInterpolate:
        return cls(low, high)

    def sample(self, rng: np.random.Generator) -> Rgb24:
        return self.low.linear_interpolate(self.high, self.inner.sample(rng))

    def sample_n(self, rng: np.random.Generator, n: int) -> list[Rgb24]:
        """Draw n colours from a single vectorised byte draw."""
        return [self.low.linear_interpolate(self.high, t) for t in self.inner.sample_n(rng, n)]
