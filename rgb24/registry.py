"""Uniform sampler registry: "sample a value between two bounds" by type.

Maps a value type to a sampler factory taking (low, high). The built-in
entries cover int, float and Rgb24, so generic code can draw any of them
the same way:

    sample_uniform(0, 10, rng)                       -> int in [0, 10)
    sample_uniform(0.0, 1.0, rng)                    -> float in [0.0, 1.0)
    sample_uniform(rgb24(0, 0, 0), rgb24(255, 0, 0)) -> Rgb24 on that line

Other types join with register(), directly or as a class decorator:

    @register(MyValue)
    class UniformMyValue:
        def __init__(self, low, high): ...
        def sample(self, rng): ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

import numpy as np

from rgb24.core.types import Rgb24
from rgb24.sample import UniformFloat, UniformInt, UniformRgb24LinearInterpolate, default_rng

logger = logging.getLogger(__name__)


class UniformSampler(Protocol):
    def sample(self, rng: np.random.Generator) -> Any: ...


SamplerFactory = Callable[[Any, Any], UniformSampler]

_registry: dict[type, SamplerFactory] = {}

_BUILTINS: dict[type, SamplerFactory] = {
    int: UniformInt,
    float: UniformFloat,
    Rgb24: UniformRgb24LinearInterpolate,
}


def discover() -> dict[type, SamplerFactory]:
    """Install the built-in samplers (once) and return the registry."""
    for value_type, factory in _BUILTINS.items():
        _registry.setdefault(value_type, factory)
    return _registry


def register(value_type: type, factory: SamplerFactory | None = None) -> Any:
    """Register factory as the uniform sampler for value_type.

    Called without a factory, returns a decorator.
    """

    def decorator(fn: SamplerFactory) -> SamplerFactory:
        discover()
        _registry[value_type] = fn
        logger.debug('registered uniform sampler %r for %s', fn, value_type.__name__)
        return fn

    if factory is None:
        return decorator
    return decorator(factory)


def get(value_type: type) -> SamplerFactory:
    """Get the sampler factory for a type."""
    reg = discover()
    if value_type not in reg:
        available = ', '.join(sorted(t.__name__ for t in reg))
        raise KeyError(f'No uniform sampler for {value_type.__name__}. Available: {available}')
    return reg[value_type]


def all_samplers() -> dict[type, SamplerFactory]:
    """Return all registered samplers."""
    return discover()


def sample_uniform(low: Any, high: Any, rng: np.random.Generator | None = None) -> Any:
    """Draw one value between low and high using the sampler for their type."""
    if type(low) is not type(high):
        raise TypeError(f'bounds must share a type, got {type(low).__name__} and {type(high).__name__}')
    factory = get(type(low))
    if rng is None:
        rng = default_rng()
    return factory(low, high).sample(rng)
