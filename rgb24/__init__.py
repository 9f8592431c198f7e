"""rgb24 — a 24-bit RGB colour value with saturating channel arithmetic.

The value type and its arithmetic live in rgb24.core and need only Pillow
(for colour-string parsing). Random sampling (rgb24.sample, rgb24.registry)
additionally needs numpy and is imported explicitly.
"""

from rgb24.core.types import BLACK, BLUE, GREEN, RED, WHITE, Rgb24, grey24, rgb24

__all__ = [
    'BLACK',
    'BLUE',
    'GREEN',
    'RED',
    'WHITE',
    'Rgb24',
    'grey24',
    'rgb24',
]
