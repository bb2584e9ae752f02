from __future__ import annotations
from typing import ClassVar, Iterator, Tuple, cast

import numpy as np
from numpy import ndarray
from boundednumbers.np_functions import clamp

ColorValue = Tuple[float, float, float, float] | ndarray


class ColorBase:
    """
    Immutable unit RGBA color, or array of colors.

    Channels are red, green, blue and opacity in [0, 1], stored in single
    precision. A scalar color keeps a 4-tuple of floats; an array keeps a
    read-only ``float32`` ndarray whose last dimension is 4.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    dtype: ClassVar[type] = np.float32

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue | ColorBase) -> None:
        if isinstance(value, ColorBase):
            value = value.value

        arr = np.asarray(value, dtype=float)
        if arr.ndim == 0 or arr.shape[-1] != self.num_channels:
            raise ValueError(
                f"{self.__class__.__name__} expects last dimension to be {self.num_channels}, "
                f"got shape {arr.shape}"
            )
        if np.isnan(arr).any():
            raise ValueError(f"{self.__class__.__name__} channels must not be NaN")

        # clamp value, then round to single precision
        arr = np.asarray(clamp(arr, 0.0, 1.0), dtype=float).astype(self.dtype)

        if arr.ndim == 1:
            stored: ColorValue = cast(Tuple[float, float, float, float], tuple(float(v) for v in arr))
        else:
            arr.setflags(write=False)
            stored = arr

        # safe assignment; __setattr__ still allows it during init
        self._value = stored

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    def as_array(self) -> ndarray:
        """Channels as a writable ``float32`` array."""
        return np.array(self._value, dtype=self.dtype)

    def _channel(self, index: int):
        if isinstance(self._value, ndarray):
            return self._value[..., index]
        return self._value[index]

    @property
    def red(self):
        return self._channel(0)

    @property
    def green(self):
        return self._channel(1)

    @property
    def blue(self):
        return self._channel(2)

    @property
    def opacity(self):
        return self._channel(3)

    # ------------------ ARRAY PROTOCOL ------------------
    def __len__(self) -> int:
        if not isinstance(self._value, ndarray):
            raise TypeError(f"scalar {self.__class__.__name__} has no len()")
        return len(self._value)

    def __iter__(self) -> Iterator[ColorBase]:
        if not isinstance(self._value, ndarray):
            raise TypeError(f"scalar {self.__class__.__name__} is not iterable")
        for row in self._value:
            yield self.__class__(row)

    def __getitem__(self, index) -> ColorBase:
        if not isinstance(self._value, ndarray):
            raise TypeError(f"scalar {self.__class__.__name__} is not subscriptable")
        return self.__class__(self._value[index])

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        if self.is_array or other.is_array:
            return self.shape == other.shape and bool(np.array_equal(self.value, other.value))
        return self._value == other._value

    def __hash__(self) -> int:
        if isinstance(self._value, ndarray):
            return hash((self._value.shape, self._value.tobytes()))
        return hash(self._value)

    def __repr__(self) -> str:
        if isinstance(self._value, ndarray):
            return f"{self.__class__.__name__}(shape={self._value.shape})"
        r, g, b, a = self._value
        return f"{self.__class__.__name__}(red={r!r}, green={g!r}, blue={b!r}, opacity={a!r})"
