"""
Color → host string formatting.

| space       | example (#ff00aa)                    |
|-------------|--------------------------------------|
| rgb / rgba  | ``255 0 170`` / ``255 0 170 255``    |
| srgb(a)     | ``1.0 0.0 0.6666666865348816``       |
| hsb(a)      | hue in degrees, saturation, brightness |
| web / weba  | ``#ff00aa`` / ``#ff00aa 1.0``        |
| hex / hexa  | ``ff00aa`` / ``ff00aa 1.0``          |

Alpha is written as a byte for rgba and as a decimal opacity everywhere
else, including weba and hexa.
"""
from __future__ import annotations
from typing import List

import numpy as np

from ..colors import ColorBase
from ..conversions import bytes_to_hex, scale
from ..types.color_space import ColorSpace, FormatType


def format_float(value) -> str:
    """Shortest repr of the double closest to ``value``."""
    return repr(float(value))


def _format_row(row: np.ndarray, space: ColorSpace) -> str:
    fmt = space.format_type
    if fmt == FormatType.INT:
        return " ".join(str(int(v)) for v in row)
    if fmt == FormatType.FLOAT:
        return " ".join(format_float(v) for v in row)

    prefix = "#" if space.base == ColorSpace.WEB else ""
    text = bytes_to_hex(row[:3], prefix=prefix)
    if space.has_alpha:
        text += " " + format_float(row[3])
    return text


def format_colors(colors: ColorBase, space: ColorSpace | str) -> List[str]:
    """Format every color of a scalar or ``(N, 4)`` array color."""
    space = ColorSpace.parse(space)
    components = np.atleast_2d(scale(np.asarray(colors.value, dtype=float), space))
    return [_format_row(row, space) for row in components]


def format_color(color: ColorBase, space: ColorSpace | str) -> str:
    """Format a single color in the space's canonical string form."""
    if color.is_array:
        raise TypeError("format_color expects a scalar color; use format_colors")
    return format_colors(color, space)[0]
