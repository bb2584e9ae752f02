"""
Colorterp Color Values
======================

Immutable RGBA colors holding single-precision channels in [0, 1].

>>> from colorterp.colors import Color
>>> Color.web("#008080").invert().to_components("rgb")
(255.0, 127.0, 127.0)

Transforms (interpolate, brighter, darker, saturate, desaturate, invert,
grayscale) always return new instances. A color may also hold an ``(N, 4)``
array, in which case the same transforms apply to every row.
"""

from .color_base import ColorBase
from .color import Color

__all__ = ['ColorBase', 'Color']
