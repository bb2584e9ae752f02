"""
Colorterp - Color Interpolation for Host Macro Systems
======================================================

Converts colors between RGB, sRGB, HSB and web/hex encodings (with optional
alpha) and interpolates a sequence of colors between a start and an end
color, returning each one as a host-ready string.

Quick Start
-----------
>>> from colorterp import InterpolationRequest, interpolate
>>> request = InterpolationRequest.from_strings(
...     "rgb", "web", "0 0 0", "255 255 255", "4"
... )
>>> interpolate(request)
['#404040', '#808080', '#bfbfbf', '#ffffff']

>>> from colorterp import MappingHost, run
>>> host = MappingHost({"icspace": "rgb", "rcspace": "rgb",
...                     "scolor": "0 0 0", "ecolor": "255 255 255",
...                     "icolors": "2"})
>>> run(host)
['128 128 128', '255 255 255']
>>> host.results["color1"]
'128 128 128'

Modules
-------
- colors: immutable Color values and their transforms
- conversions: RGB/HSB/hex conversions and component scaling
- parsing: host string → Color
- formatting: Color → host string
- gradients: fraction generation and the Gradient1D engine
- pipeline: request → results, and host orchestration
"""

from .colors import Color, ColorBase
from .conversions import convert
from .errors import (
    ColorTerpError,
    ParseError,
    ArityError,
    UnsupportedSpaceError,
    RangeError,
)
from .formatting import format_color, format_colors
from .gradients import Gradient1D, compute_fractions
from .host import MacroHost, MappingHost, result_names
from .parsing import parse_color
from .pipeline import interpolate, run
from .request import InterpolationRequest
from .types.color_space import ColorSpace, FormatType
from .types.options import GrayscaleMode, Modifier, Spacing

__version__ = "1.0.0"

__all__ = [
    # Colors
    "Color", "ColorBase",

    # Parsing, formatting, conversion
    "parse_color", "format_color", "format_colors", "convert",

    # Interpolation
    "Gradient1D", "compute_fractions",
    "InterpolationRequest", "interpolate", "run",

    # Host boundary
    "MacroHost", "MappingHost", "result_names",

    # Enums
    "ColorSpace", "FormatType", "Modifier", "Spacing", "GrayscaleMode",

    # Errors
    "ColorTerpError", "ParseError", "ArityError", "UnsupportedSpaceError", "RangeError",

    # Version
    "__version__",
]
