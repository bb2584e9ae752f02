from __future__ import annotations
import math
from typing import Sequence

import numpy as np

from ..constants import HUE_360, MAX_BYTE
from ..conversions import hex_to_bytes, hsb_to_unit_rgb, normalize, scale, unit_rgb_to_hsb
from ..errors import RangeError
from ..types.color_space import ColorSpace
from ..types.options import Modifier
from .color_base import ColorBase
from . import transforms


def _check_range(name: str, value: float, low: float, high: float, *, high_open: bool = False) -> None:
    if not math.isfinite(value):
        raise RangeError(f"{name} must be finite, got {value!r}")
    too_high = value >= high if high_open else value > high
    if value < low or too_high:
        bracket = ")" if high_open else "]"
        raise RangeError(f"{name} {value!r} outside [{low}, {high}{bracket}")


class Color(ColorBase):
    """
    Immutable RGBA color with the host platform's construction and
    derivation rules. Every transform returns a new color.

    Construction
    ------------
    The same magenta can be built from bytes, unit channels, HSB or hex::

        Color.rgb(255, 0, 170)
        Color.color(1.0, 0.0, 0.6667)
        Color.hsb(320.0, 1.0, 1.0, 0.5)
        Color.web("#ff00aa")
    """
    __slots__ = ()

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def rgb(cls, red: int, green: int, blue: int, opacity: float = 1.0) -> Color:
        """Build from RGB bytes in [0, 255] and an opacity in [0, 1]."""
        for name, v in (("red", red), ("green", green), ("blue", blue)):
            _check_range(name, v, 0, MAX_BYTE)
        _check_range("opacity", opacity, 0.0, 1.0)
        return cls((red / MAX_BYTE, green / MAX_BYTE, blue / MAX_BYTE, opacity))

    @classmethod
    def color(cls, red: float, green: float, blue: float, opacity: float = 1.0) -> Color:
        """Build from unit RGB channels and opacity, all in [0, 1]."""
        for name, v in (("red", red), ("green", green), ("blue", blue), ("opacity", opacity)):
            _check_range(name, v, 0.0, 1.0)
        return cls((red, green, blue, opacity))

    @classmethod
    def hsb(cls, hue: float, saturation: float, brightness: float, opacity: float = 1.0) -> Color:
        """Build from hue in [0, 360), saturation, brightness and opacity in [0, 1]."""
        _check_range("hue", hue, 0.0, HUE_360, high_open=True)
        for name, v in (("saturation", saturation), ("brightness", brightness), ("opacity", opacity)):
            _check_range(name, v, 0.0, 1.0)
        r, g, b = hsb_to_unit_rgb(hue, saturation, brightness)
        return cls((r, g, b, opacity))

    @classmethod
    def web(cls, token: str, opacity: float | None = None) -> Color:
        """
        Build from a hex string, ``#rrggbb``, ``rrggbb``, ``0xrrggbb``, with an
        optional trailing alpha byte, or the 3/4 digit shorthands.

        An explicit ``opacity`` multiplies any alpha byte embedded in the token.
        """
        (r, g, b), alpha_byte = hex_to_bytes(token)
        alpha = 1.0 if alpha_byte is None else alpha_byte / MAX_BYTE
        if opacity is not None:
            _check_range("opacity", opacity, 0.0, 1.0)
            alpha *= opacity
        return cls((r / MAX_BYTE, g / MAX_BYTE, b / MAX_BYTE, alpha))

    @classmethod
    def from_components(cls, components: Sequence[float], space: ColorSpace | str) -> Color:
        """Build from components already expressed in ``space`` units."""
        space = ColorSpace.parse(space)
        return cls(normalize(np.asarray(components, dtype=float), space))

    def to_components(self, space: ColorSpace | str) -> tuple[float, ...]:
        """Channels expressed in ``space`` units."""
        space = ColorSpace.parse(space)
        return tuple(float(v) for v in scale(np.asarray(self.value, dtype=float), space).flat)

    # ------------------ HSB VIEW ------------------
    def _hsb(self) -> tuple[float, float, float]:
        if self.is_array:
            raise TypeError("HSB properties are only defined for scalar colors")
        return unit_rgb_to_hsb(self.red, self.green, self.blue)

    @property
    def hue(self) -> float:
        return self._hsb()[0]

    @property
    def saturation(self) -> float:
        return self._hsb()[1]

    @property
    def brightness(self) -> float:
        return self._hsb()[2]

    # ------------------ TRANSFORMS ------------------
    def _apply(self, fn, *args) -> Color:
        return self.__class__(fn(self.as_array(), *args))

    def interpolate(self, end: Color, t: float) -> Color:
        """Linear interpolation towards ``end``; t <= 0 is self, t >= 1 is end."""
        if self.is_array or end.is_array:
            raise TypeError("interpolate expects scalar colors")
        return self.__class__(transforms.np_interpolate(self.as_array(), end.as_array(), [t])[0])

    def derive(self, saturation_factor: float, brightness_factor: float) -> Color:
        return self._apply(transforms.np_derive, saturation_factor, brightness_factor)

    def brighter(self) -> Color:
        return self._apply(transforms.np_brighter)

    def darker(self) -> Color:
        return self._apply(transforms.np_darker)

    def saturate(self) -> Color:
        return self._apply(transforms.np_saturate)

    def desaturate(self) -> Color:
        return self._apply(transforms.np_desaturate)

    def modify(self, modifier: Modifier | str) -> Color:
        return self._apply(transforms.apply_modifier, modifier)

    def invert(self) -> Color:
        return self._apply(transforms.np_invert)

    def grayscale(self) -> Color:
        return self._apply(transforms.np_grayscale)
