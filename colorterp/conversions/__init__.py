"""
Colorterp Color Space Conversions
=================================

Conversions between unit RGB and the host platform's color spaces.

RGB ↔ HSB:
    unit_rgb_to_hsb(r, g, b) / np_unit_rgb_to_hsb(r, g, b)
    hsb_to_unit_rgb(h, s, b) / np_hsb_to_unit_rgb(h, s, b)

Hexadecimal:
    hex_to_bytes(token), bytes_to_hex(values), unit_to_byte(values)

High-level API:
    normalize(components, space)  space units → unit RGBA
    scale(unit_rgba, space)       unit RGBA → space units
    convert(components, from_space, to_space)
"""

from .to_hsb import unit_rgb_to_hsb, np_unit_rgb_to_hsb
from .to_rgb import hsb_to_unit_rgb, np_hsb_to_unit_rgb
from .hex import hex_to_bytes, bytes_to_hex, byte_to_hex, unit_to_byte
from .wrapper import normalize, scale, convert

__all__ = [
    'unit_rgb_to_hsb',
    'np_unit_rgb_to_hsb',
    'hsb_to_unit_rgb',
    'np_hsb_to_unit_rgb',
    'hex_to_bytes',
    'bytes_to_hex',
    'byte_to_hex',
    'unit_to_byte',
    'normalize',
    'scale',
    'convert',
]
