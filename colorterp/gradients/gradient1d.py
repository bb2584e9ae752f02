from __future__ import annotations
import warnings

import numpy as np
from numpy import ndarray as NDArray

from ..colors import Color, ColorBase
from ..colors import transforms
from ..types.options import GrayscaleMode, Modifier


class Gradient1D(ColorBase):
    """
    Represents a 1D sequence of colors interpolated between two endpoints.

    Value is an ``(N, 4)`` float32 array. ``apply`` runs the post
    interpolation pipeline in a fixed order:
    modifier → invert → grayscale.
    """
    __slots__ = ()

    def __init__(self, value) -> None:
        super().__init__(value)
        if not self.is_array or len(self.shape) != 2:
            raise ValueError(
                f"Gradient1D requires 2D array (N, channels), got {np.shape(self.value)}"
            )

    @classmethod
    def from_colors(cls, start: Color, end: Color, fractions: NDArray) -> Gradient1D:
        """
        Create a gradient by linear interpolation at every fraction.

        Args:
            start: color at fraction 0
            end: color at fraction 1
            fractions: 1D positions, as produced by compute_fractions
        """
        if start.is_array or end.is_array:
            raise TypeError("Gradient1D.from_colors expects scalar colors")
        fractions = np.asarray(fractions, dtype=float)
        if fractions.ndim != 1 or fractions.size == 0:
            raise ValueError("fractions must be a non-empty 1D sequence")
        return cls(transforms.np_interpolate(start.as_array(), end.as_array(), fractions))

    def apply(
        self,
        modifier: Modifier | str = Modifier.NONE,
        invert: bool = False,
        grayscale: bool = False,
        grayscale_mode: GrayscaleMode | str = GrayscaleMode.LUMA,
    ) -> Gradient1D:
        colors = transforms.apply_modifier(self.as_array(), modifier)
        if invert:
            colors = transforms.np_invert(colors)
        if grayscale:
            if GrayscaleMode.parse(grayscale_mode) == GrayscaleMode.LEGACY_INVERT:
                warnings.warn(
                    "LEGACY_INVERT grayscale re-applies invert and does not produce gray colors",
                    DeprecationWarning,
                    stacklevel=2,
                )
                colors = transforms.np_invert(colors)
            else:
                colors = transforms.np_grayscale(colors)
        return self.__class__(colors)

    def colors(self) -> list[Color]:
        """The gradient as a list of scalar colors."""
        return [Color(row) for row in self.value]

    def __iter__(self):
        return iter(self.colors())

    def __getitem__(self, index):
        rows = self.value[index]
        return Color(rows) if rows.ndim == 1 else self.__class__(rows)
