import numpy as np
from numpy import ndarray as NDArray

from ..constants import HUE_360


def unit_rgb_to_hsb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB (0..1) to HSB.

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        b ∈ [0, 1]
    """
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    brightness = cmax
    saturation = (cmax - cmin) / cmax if cmax != 0 else 0.0

    if saturation == 0:
        return 0.0, saturation, brightness

    delta = cmax - cmin
    redc = (cmax - r) / delta
    greenc = (cmax - g) / delta
    bluec = (cmax - b) / delta
    if r == cmax:
        hue = bluec - greenc
    elif g == cmax:
        hue = 2.0 + redc - bluec
    else:
        hue = 4.0 + greenc - redc
    hue = hue / 6.0
    if hue < 0:
        hue = hue + 1.0
    return hue * HUE_360, saturation, brightness


def np_unit_rgb_to_hsb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized unit RGB to HSB.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsb: array of shape (..., 3): (hue [0,360), saturation [0,1], brightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    cmax = np.maximum.reduce([r, g, b])
    cmin = np.minimum.reduce([r, g, b])
    delta = cmax - cmin

    nonzero = cmax != 0
    s = np.where(nonzero, delta / np.where(nonzero, cmax, 1.0), 0.0)

    chromatic = s != 0
    safe_delta = np.where(chromatic, delta, 1.0)
    redc = (cmax - r) / safe_delta
    greenc = (cmax - g) / safe_delta
    bluec = (cmax - b) / safe_delta

    h = np.select(
        [r == cmax, g == cmax],
        [bluec - greenc, 2.0 + redc - bluec],
        default=4.0 + greenc - redc,
    ) / 6.0
    h = np.where(h < 0, h + 1.0, h)
    h = np.where(chromatic, h * HUE_360, 0.0)

    return np.stack([h, s, cmax], axis=-1)
