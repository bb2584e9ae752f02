import numpy as np
from numpy import ndarray as NDArray

from ..errors import RangeError
from ..types.options import Spacing


def compute_fractions(points: int, spacing: Spacing = Spacing.INCLUSIVE, include_start: bool = False) -> NDArray:
    """
    Interpolation positions between a start (0) and end (1) color.

    Args:
        points: number of interpolated colors, at least 1
        spacing: INCLUSIVE gives (i+1)/N, ending on the end color;
                 INTERIOR gives (i+1)/(N+1), strictly between the endpoints
        include_start: prepend 0.0 so the start color is reported first

    Returns:
        1D float array of length ``points`` (+1 with include_start)

    >>> compute_fractions(4)
    array([0.25, 0.5 , 0.75, 1.  ])
    >>> compute_fractions(4, Spacing.INTERIOR)
    array([0.2, 0.4, 0.6, 0.8])
    """
    if isinstance(points, bool) or int(points) != points:
        raise RangeError(f"points must be an integer, got {points!r}")
    points = int(points)
    if points < 1:
        raise RangeError(f"points must be at least 1, got {points}")

    spacing = Spacing.parse(spacing)
    steps = np.arange(1, points + 1, dtype=float)
    divisor = points if spacing == Spacing.INCLUSIVE else points + 1
    fractions = steps / divisor

    if include_start:
        fractions = np.concatenate([[0.0], fractions])
    return fractions
