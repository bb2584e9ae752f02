import math

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.np_functions import cyclic_wrap_float

from ..constants import HUE_360


def hsb_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSB (hue in degrees, s and v in 0..1) to unit RGB."""
    hue = (((h % HUE_360) + HUE_360) % HUE_360) / HUE_360
    if s == 0:
        return v, v, v

    h6 = (hue - math.floor(hue)) * 6.0
    f = h6 - math.floor(h6)
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - (s * (1.0 - f)))

    sector = int(h6)
    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def np_hsb_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSB to unit RGB.

    Args:
        h: array-like or scalar, hue in degrees (wrapped into [0,360))
        s: array-like or scalar, [0,1] saturation
        v: array-like or scalar, [0,1] brightness

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    hue = np.asarray(cyclic_wrap_float(np.array(h), 0.0, HUE_360), dtype=float) / HUE_360
    h6 = (hue - np.floor(hue)) * 6.0
    f = h6 - np.floor(h6)
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - (s * (1.0 - f)))

    sector = h6.astype(int)
    conditions = [sector == i for i in range(5)]
    r = np.select(conditions, [v, q, p, p, t], default=v)
    g = np.select(conditions, [t, v, v, q, p], default=p)
    b = np.select(conditions, [p, p, t, v, v], default=q)

    gray = s == 0
    r = np.where(gray, v, r)
    g = np.where(gray, v, g)
    b = np.where(gray, v, b)

    return np.stack([r, g, b], axis=-1)
