"""Immutable interpolation request built once per invocation."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

from . import constants as c
from .colors import Color
from .errors import ParseError, RangeError
from .parsing import parse_color
from .types.color_space import ColorSpace
from .types.options import GrayscaleMode, Modifier, Spacing

ParameterReader = Callable[[str], Optional[str]]


def parse_flag(text: str | bool | None) -> bool:
    """Boolean host flag; an empty or missing value is false."""
    if isinstance(text, bool):
        return text
    value = "" if text is None else str(text).strip().lower()
    if value in c.TRUE_STRINGS:
        return True
    if value in c.FALSE_STRINGS:
        return False
    raise ParseError(f"Expected a boolean flag, got {text!r}")


def parse_points(text: str | int) -> int:
    """Interpolation point count, a positive integer."""
    if isinstance(text, bool):
        raise ParseError(f"Expected an integer point count, got {text!r}")
    if isinstance(text, int):
        points = text
    else:
        try:
            points = int(str(text).strip())
        except ValueError:
            raise ParseError(f"Expected an integer point count, got {text!r}") from None
    if points < 1:
        raise RangeError(f"Point count must be at least 1, got {points}")
    return points


@dataclass(frozen=True)
class InterpolationRequest:
    start: Color
    end: Color
    input_space: ColorSpace
    output_space: ColorSpace
    points: int
    modifier: Modifier = Modifier.NONE
    invert: bool = False
    grayscale: bool = False
    spacing: Spacing = Spacing.INCLUSIVE
    include_start: bool = False
    grayscale_mode: GrayscaleMode = GrayscaleMode.LUMA

    def __post_init__(self):
        object.__setattr__(self, "input_space", ColorSpace.parse(self.input_space))
        object.__setattr__(self, "output_space", ColorSpace.parse(self.output_space))
        object.__setattr__(self, "points", parse_points(self.points))
        object.__setattr__(self, "modifier", Modifier.parse(self.modifier))
        object.__setattr__(self, "invert", parse_flag(self.invert))
        object.__setattr__(self, "grayscale", parse_flag(self.grayscale))
        object.__setattr__(self, "include_start", parse_flag(self.include_start))
        object.__setattr__(self, "spacing", Spacing.parse(self.spacing))
        object.__setattr__(self, "grayscale_mode", GrayscaleMode.parse(self.grayscale_mode))
        if self.start.is_array or self.end.is_array:
            raise TypeError("start and end must be scalar colors")

    @classmethod
    def from_strings(
        cls,
        input_space: str,
        output_space: str,
        start: str,
        end: str,
        points: str,
        modifier: str = "",
        invert: str = "",
        grayscale: str = "",
        *,
        spacing: str = "",
        include_start: str = "",
        grayscale_mode: str = "",
    ) -> InterpolationRequest:
        """Build a request from string-encoded values, in host argument order."""
        in_space = ColorSpace.parse(input_space)
        return cls(
            start=parse_color(start, in_space),
            end=parse_color(end, in_space),
            input_space=in_space,
            output_space=ColorSpace.parse(output_space),
            points=parse_points(points),
            modifier=Modifier.parse(modifier),
            invert=parse_flag(invert),
            grayscale=parse_flag(grayscale),
            spacing=Spacing.parse(spacing),
            include_start=parse_flag(include_start),
            grayscale_mode=GrayscaleMode.parse(grayscale_mode),
        )

    @classmethod
    def from_parameters(cls, read: ParameterReader) -> InterpolationRequest:
        """Build a request by reading the host's named parameters."""
        def get(name: str) -> str:
            value = read(name)
            return "" if value is None else value

        return cls.from_strings(
            get(c.MACRO_INPUT_SPACE),
            get(c.MACRO_OUTPUT_SPACE),
            get(c.MACRO_START_COLOR),
            get(c.MACRO_END_COLOR),
            get(c.MACRO_POINTS),
            get(c.MACRO_MODIFIER),
            get(c.MACRO_INVERT),
            get(c.MACRO_GRAYSCALE),
            spacing=get(c.MACRO_SPACING),
            include_start=get(c.MACRO_INCLUDE_START),
            grayscale_mode=get(c.MACRO_GRAYSCALE_MODE),
        )
