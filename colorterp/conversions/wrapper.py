import numpy as np
from typing import Tuple, cast

from boundednumbers.np_functions import clamp

from ..constants import MAX_BYTE
from ..types.color_space import ColorSpace, FormatType
from .hex import unit_to_byte
from .to_hsb import np_unit_rgb_to_hsb
from .to_rgb import np_hsb_to_unit_rgb


def _split_alpha(color: np.ndarray, space: ColorSpace) -> Tuple[np.ndarray, np.ndarray | None]:
    if color.shape[-1] != space.num_channels:
        raise ValueError(
            f"{space.value} expects last dimension to be {space.num_channels}, got shape {color.shape}"
        )
    if space.has_alpha:
        return color[..., :3], color[..., 3]
    return color, None


def normalize_alpha(alpha: np.ndarray | None) -> np.ndarray | None:
    """
    Map an input alpha channel to opacity in [0, 1].

    rgba takes its alpha byte unscaled: 0 is transparent and any positive
    byte clamps to fully opaque.
    """
    if alpha is None:
        return None
    return np.asarray(clamp(alpha, 0.0, 1.0), dtype=float)


def scale_alpha(opacity: np.ndarray, space: ColorSpace) -> np.ndarray:
    """Map opacity in [0, 1] to the output space's alpha units."""
    if space.format_type == FormatType.INT:
        return unit_to_byte(opacity).astype(float)
    return opacity


def normalize(color: np.ndarray, space: ColorSpace) -> np.ndarray:
    """
    Convert components expressed in ``space`` units to unit RGBA.

    Args:
        color: array of shape (..., 3) or (..., 4) matching the space
        space: color space the components are expressed in

    Returns:
        array of shape (..., 4): red, green, blue, opacity in [0, 1]
    """
    color = np.asarray(color, dtype=float)
    base, alpha = _split_alpha(color, space)

    fmt = space.format_type
    if space.base == ColorSpace.HSB:
        rgb = np_hsb_to_unit_rgb(base[..., 0], base[..., 1], base[..., 2])
    elif fmt in (FormatType.INT, FormatType.HEX):
        rgb = base / MAX_BYTE
    else:
        rgb = base

    # hex spaces carry opacity already in [0, 1]
    opacity = normalize_alpha(alpha)
    if opacity is None:
        opacity = np.ones(rgb.shape[:-1], dtype=float)
    return np.concatenate([rgb, opacity[..., None]], axis=-1)


def scale(color: np.ndarray, space: ColorSpace) -> np.ndarray:
    """
    Convert unit RGBA to components expressed in ``space`` units.

    INT and HEX spaces yield bytes (as floats) for the RGB channels; the
    alpha channel of hex spaces stays a unit opacity.
    """
    color = np.asarray(color, dtype=float)
    rgb, opacity = color[..., :3], color[..., 3]

    fmt = space.format_type
    if space.base == ColorSpace.HSB:
        out = np_unit_rgb_to_hsb(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    elif fmt in (FormatType.INT, FormatType.HEX):
        out = unit_to_byte(rgb).astype(float)
    else:
        out = rgb

    if space.has_alpha:
        return np.concatenate([out, scale_alpha(opacity, space)[..., None]], axis=-1)
    return out


def convert(color, from_space: ColorSpace | str, to_space: ColorSpace | str) -> tuple:
    """
    Convert one color's components between two spaces.

    >>> convert((255, 0, 0), "rgb", "hsb")
    (0.0, 1.0, 1.0)
    """
    from_space = ColorSpace.parse(from_space)
    to_space = ColorSpace.parse(to_space)
    unit = normalize(np.asarray(color, dtype=float), from_space)
    result = scale(unit, to_space)
    if to_space.format_type == FormatType.INT:
        return tuple(int(v) for v in result.flat)
    return cast(tuple, tuple(float(v) for v in result.flat))
