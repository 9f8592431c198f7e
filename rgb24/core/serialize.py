"""Structured encode/decode for Rgb24.

The structured form is the plain field mapping {'r': .., 'g': .., 'b': ..},
always in that order. JSON output is that mapping (or a list of them)
passed through json.dumps.
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any

from rgb24.core.types import Rgb24

FIELDS = ('r', 'g', 'b')


def to_dict(colour: Rgb24) -> dict[str, int]:
    """Encode a colour as {'r': .., 'g': .., 'b': ..}."""
    return {'r': colour.r, 'g': colour.g, 'b': colour.b}


def from_dict(data: Mapping[str, Any]) -> Rgb24:
    """Decode a mapping with exactly the keys r, g, b."""
    if not isinstance(data, Mapping):
        raise ValueError(f'expected a mapping with keys r, g, b, got {type(data).__name__}')
    missing = [k for k in FIELDS if k not in data]
    if missing:
        raise ValueError(f'missing field(s): {", ".join(missing)}')
    extra = sorted(str(k) for k in data if k not in FIELDS)
    if extra:
        raise ValueError(f'unknown field(s): {", ".join(extra)}')
    return Rgb24(data['r'], data['g'], data['b'])


def to_json(value: Rgb24 | Iterable[Rgb24], indent: int | None = None) -> str:
    """Encode one colour, or an iterable of colours, as JSON."""
    obj: Any
    if isinstance(value, Rgb24):
        obj = to_dict(value)
    else:
        obj = [to_dict(c) for c in value]
    return json.dumps(obj, indent=indent)


def from_json(text: str) -> Rgb24 | list[Rgb24]:
    """Decode JSON produced by to_json.

    A JSON object decodes to one Rgb24, a JSON array to a list of them.
    """
    obj = json.loads(text)
    if isinstance(obj, list):
        return [from_dict(item) for item in obj]
    return from_dict(obj)
