"""Colour-string parsing for Rgb24.from_hex.

Accepts '#rrggbb', '#rgb', the same without the leading '#', and anything
Pillow's ImageColor understands (CSS names such as 'slategray',
'rgb(10, 20, 30)', 'hsl(...)'). Alpha components are rejected rather than
silently dropped.
"""

import re

from PIL import ImageColor

_BARE_HEX = re.compile(r'^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def parse_colour(text: str) -> tuple[int, int, int]:
    """Return the (r, g, b) channels named by text. Raises ValueError if unparseable."""
    if not isinstance(text, str):
        raise ValueError(f'colour must be a string, got {type(text).__name__}')
    candidate = text.strip()
    if _BARE_HEX.match(candidate):
        candidate = '#' + candidate
    # ImageColor raises ValueError for unknown names and malformed hex
    rgb = ImageColor.getrgb(candidate)
    if len(rgb) != 3:
        raise ValueError(f'colour {text!r} has an alpha channel; Rgb24 has none')
    r, g, b = rgb
    return (int(r), int(g), int(b))
