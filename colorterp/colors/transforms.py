"""Vectorised color transforms on unit RGBA arrays.

All functions accept arrays whose last dimension holds red, green, blue and
opacity, and return new ``float32`` arrays; opacity is never modified except
by interpolation.
"""
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.np_functions import clamp, cyclic_wrap_float

from ..constants import (
    BLACK_BRIGHTEN_FLOOR,
    DARKER_BRIGHTER_FACTOR,
    GRAYSCALE_WEIGHTS,
    HUE_360,
    SATURATE_DESATURATE_FACTOR,
)
from ..conversions import np_hsb_to_unit_rgb, np_unit_rgb_to_hsb
from ..types.options import Modifier

F32 = np.float32


def np_interpolate(start: NDArray, end: NDArray, fractions: NDArray) -> NDArray:
    """
    Channel-wise linear interpolation in single precision.

    Args:
        start: (4,) unit RGBA
        end: (4,) unit RGBA
        fractions: (N,) positions; values <= 0 yield start, values >= 1 yield end

    Returns:
        (N, 4) float32 array
    """
    start = np.asarray(start, dtype=F32)
    end = np.asarray(end, dtype=F32)
    t = np.asarray(fractions, dtype=float).reshape(-1, 1)

    mixed = start + (end - start) * t.astype(F32)
    mixed = np.where(t <= 0.0, start, mixed)
    mixed = np.where(t >= 1.0, end, mixed)
    return mixed.astype(F32)


def np_derive(colors: NDArray, saturation_factor: float, brightness_factor: float) -> NDArray:
    """
    Scale saturation and brightness in HSB space.

    Black gets a small base brightness when brightened so that it can move
    away from zero.
    """
    colors = np.asarray(colors, dtype=F32)
    rgb = colors[..., :3].astype(float)
    hsb = np_unit_rgb_to_hsb(rgb[..., 0], rgb[..., 1], rgb[..., 2])

    h = np.asarray(cyclic_wrap_float(hsb[..., 0], 0.0, HUE_360), dtype=float)
    b = hsb[..., 2]
    if brightness_factor > 1.0:
        b = np.where(b == 0, BLACK_BRIGHTEN_FLOOR, b)
    s = np.asarray(clamp(hsb[..., 1] * saturation_factor, 0.0, 1.0), dtype=float)
    b = np.asarray(clamp(b * brightness_factor, 0.0, 1.0), dtype=float)

    out = np.empty(colors.shape, dtype=F32)
    out[..., :3] = np_hsb_to_unit_rgb(h, s, b)
    out[..., 3] = colors[..., 3]
    return out


def np_brighter(colors: NDArray) -> NDArray:
    return np_derive(colors, 1.0, 1.0 / DARKER_BRIGHTER_FACTOR)


def np_darker(colors: NDArray) -> NDArray:
    return np_derive(colors, 1.0, DARKER_BRIGHTER_FACTOR)


def np_saturate(colors: NDArray) -> NDArray:
    return np_derive(colors, 1.0 / SATURATE_DESATURATE_FACTOR, 1.0)


def np_desaturate(colors: NDArray) -> NDArray:
    return np_derive(colors, SATURATE_DESATURATE_FACTOR, 1.0)


def np_invert(colors: NDArray) -> NDArray:
    """Complement the RGB channels."""
    out = np.array(colors, dtype=F32)
    out[..., :3] = F32(1.0) - out[..., :3]
    return out


def np_grayscale(colors: NDArray) -> NDArray:
    """Project onto the gray axis using luma weights."""
    colors = np.asarray(colors, dtype=F32)
    wr, wg, wb = GRAYSCALE_WEIGHTS
    rgb = colors[..., :3].astype(float)
    gray = wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]

    out = np.empty(colors.shape, dtype=F32)
    out[..., :3] = np.clip(gray, 0.0, 1.0)[..., None]
    out[..., 3] = colors[..., 3]
    return out


MODIFIER_TRANSFORMS = {
    Modifier.BRIGHTER: np_brighter,
    Modifier.DARKER: np_darker,
    Modifier.SATURATED: np_saturate,
    Modifier.DESATURATED: np_desaturate,
}


def apply_modifier(colors: NDArray, modifier: Modifier) -> NDArray:
    transform = MODIFIER_TRANSFORMS.get(Modifier.parse(modifier))
    if transform is None:
        return np.asarray(colors, dtype=F32)
    return transform(colors)
