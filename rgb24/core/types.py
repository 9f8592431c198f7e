"""The Rgb24 colour value type and its channel arithmetic.

Every operation is per-channel and returns a new value. Overflow and
underflow saturate to [0, 255] instead of wrapping. Dividing by zero raises
ZeroDivisionError: a zero divisor is a caller bug, never a defined result.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass

CHANNEL_MIN = 0
CHANNEL_MAX = 255


def _as_int(name: str, value: int) -> int:
    # bool is an int subclass but True/False are not channel values
    if isinstance(value, bool):
        raise ValueError(f'{name} must be an int, got bool')
    try:
        # accepts numpy integer scalars, always yields a plain Python int
        return operator.index(value)
    except TypeError:
        raise ValueError(f'{name} must be an int, got {type(value).__name__}') from None


def _as_channel(name: str, value: int) -> int:
    value = _as_int(name, value)
    if not CHANNEL_MIN <= value <= CHANNEL_MAX:
        raise ValueError(f'{name} must be in [{CHANNEL_MIN}, {CHANNEL_MAX}], got {value}')
    return value


def _as_unsigned(name: str, value: int) -> int:
    value = _as_int(name, value)
    if value < 0:
        raise ValueError(f'{name} must be non-negative, got {value}')
    return value


def _saturate(value: int) -> int:
    return min(max(value, CHANNEL_MIN), CHANNEL_MAX)


@dataclass(frozen=True, order=True, slots=True)
class Rgb24:
    """A 24-bit RGB colour: three 8-bit channels.

    Ordering is lexicographic over (r, g, b), so values sort and hash like
    plain tuples.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'r', _as_channel('r', self.r))
        object.__setattr__(self, 'g', _as_channel('g', self.g))
        object.__setattr__(self, 'b', _as_channel('b', self.b))

    def __repr__(self) -> str:
        return f'Rgb24({self.r}, {self.g}, {self.b})'

    # -- construction ------------------------------------------------------

    @classmethod
    def new(cls, r: int, g: int, b: int) -> Rgb24:
        return cls(r, g, b)

    @classmethod
    def new_grey(cls, c: int) -> Rgb24:
        """Achromatic grey with every channel equal to c."""
        return cls(c, c, c)

    @classmethod
    def from_u32(cls, value: int) -> Rgb24:
        """Unpack a 0xRRGGBB integer."""
        value = _as_unsigned('value', value)
        if value > 0xFFFFFF:
            raise ValueError(f'value must be at most 0xffffff, got {value:#x}')
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hex(cls, text: str) -> Rgb24:
        """Parse '#rrggbb', '#rgb', 'rrggbb' or a CSS colour name."""
        from rgb24.core.hexcolour import parse_colour

        return cls(*parse_colour(text))

    def _map(self, fn: Callable[[int], int]) -> Rgb24:
        return Rgb24(fn(self.r), fn(self.g), fn(self.b))

    def _zip(self, other: Rgb24, fn: Callable[[int, int], int]) -> Rgb24:
        return Rgb24(fn(self.r, other.r), fn(self.g, other.g), fn(self.b, other.b))

    # -- clamping ----------------------------------------------------------

    def floor(self, min: int) -> Rgb24:
        """Raise every channel to at least min. Channels are clamped independently."""
        min = _as_channel('min', min)
        return self._map(lambda c: c if c > min else min)

    def ceil(self, max: int) -> Rgb24:
        """Cap every channel at max. Channels are clamped independently."""
        max = _as_channel('max', max)
        return self._map(lambda c: c if c < max else max)

    # -- additive ----------------------------------------------------------

    def saturating_add(self, other: Rgb24) -> Rgb24:
        return self._zip(other, lambda a, b: _saturate(a + b))

    def saturating_sub(self, other: Rgb24) -> Rgb24:
        return self._zip(other, lambda a, b: _saturate(a - b))

    # -- scalar ------------------------------------------------------------

    def saturating_scalar_mul(self, scalar: int) -> Rgb24:
        """Multiply every channel by scalar, saturating at 255.

        scalar has no upper bound; large values saturate every non-zero channel.
        """
        scalar = _as_unsigned('scalar', scalar)
        return self._map(lambda c: _saturate(c * scalar))

    def scalar_div(self, scalar: int) -> Rgb24:
        """Floor-divide every channel by scalar.

        Raises ZeroDivisionError when scalar is 0, whatever the colour.
        """
        scalar = _as_unsigned('scalar', scalar)
        if scalar == 0:
            raise ZeroDivisionError(f'{self!r}.scalar_div(0)')
        return self._map(lambda c: c // scalar)

    def saturating_scalar_mul_div(self, numerator: int, denominator: int) -> Rgb24:
        """Compute channel * numerator // denominator, saturating at 255.

        The multiply happens before the divide: (1, 2, 3) scaled by 1500/1000
        is (1, 3, 4), not (1, 2, 3). Raises ZeroDivisionError when
        denominator is 0.
        """
        numerator = _as_unsigned('numerator', numerator)
        denominator = _as_unsigned('denominator', denominator)
        if denominator == 0:
            raise ZeroDivisionError(f'{self!r}.saturating_scalar_mul_div({numerator}, 0)')
        return self._map(lambda c: _saturate(c * numerator // denominator))

    # -- normalised (255 == 1.0) -------------------------------------------

    def normalised_mul(self, other: Rgb24) -> Rgb24:
        """Per-channel product with 255 standing for 1.0. Truncates, never rounds."""
        return self._zip(other, lambda a, b: a * b // CHANNEL_MAX)

    def normalised_scalar_mul(self, scalar: int) -> Rgb24:
        """Scale every channel by scalar / 255."""
        scalar = _as_channel('scalar', scalar)
        return self._map(lambda c: c * scalar // CHANNEL_MAX)

    def linear_interpolate(self, to: Rgb24, by: int) -> Rgb24:
        """Move a fraction by / 255 of the way from self towards to.

        The per-channel delta truncates toward zero, so the result always
        lies between the two endpoints. by=0 gives self, by=255 gives to.
        """
        by = _as_channel('by', by)

        def channel(start: int, end: int) -> int:
            total = end - start
            delta = abs(total) * by // CHANNEL_MAX
            return start + delta if total >= 0 else start - delta

        return self._zip(to, channel)

    # -- conversion --------------------------------------------------------

    def to_float_rgb(self) -> tuple[float, float, float]:
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)

    def to_float_rgba(self, alpha: float) -> tuple[float, float, float, float]:
        """Float channels plus alpha, passed through unchecked."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, alpha)

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_u32(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    def to_hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'

    def max_channel(self) -> int:
        return max(self.r, self.g, self.b)

    def min_channel(self) -> int:
        return min(self.r, self.g, self.b)


BLACK = Rgb24(0, 0, 0)
WHITE = Rgb24(255, 255, 255)
RED = Rgb24(255, 0, 0)
GREEN = Rgb24(0, 255, 0)
BLUE = Rgb24(0, 0, 255)


def rgb24(r: int, g: int, b: int) -> Rgb24:
    return Rgb24(r, g, b)


def grey24(c: int) -> Rgb24:
    return Rgb24.new_grey(c)
