# No dependencies
from __future__ import annotations
from enum import Enum

from ..errors import UnsupportedSpaceError


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    HEX = "hex"


class ColorSpace(str, Enum):
    RGB = "rgb"
    RGBA = "rgba"
    SRGB = "srgb"
    SRGBA = "srgba"
    HSB = "hsb"
    HSBA = "hsba"
    WEB = "web"
    WEBA = "weba"
    HEX = "hex"
    HEXA = "hexa"

    @classmethod
    def parse(cls, tag: str | ColorSpace) -> ColorSpace:
        """Resolve a host supplied tag, ignoring case and surrounding blanks."""
        if isinstance(tag, ColorSpace):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            supported = ", ".join(space.value for space in cls)
            raise UnsupportedSpaceError(
                f"Unsupported color space {tag!r}; expected one of {supported}"
            ) from None

    @property
    def has_alpha(self) -> bool:
        return self in ALPHA_SPACES

    @property
    def base(self) -> ColorSpace:
        """The space without its alpha channel."""
        return ColorSpace(self.value[:-1]) if self.has_alpha else self

    @property
    def format_type(self) -> FormatType:
        return space_format_types[self.base]

    @property
    def is_hex(self) -> bool:
        return self.format_type == FormatType.HEX

    @property
    def num_channels(self) -> int:
        return 4 if self.has_alpha else 3


ALPHA_SPACES = {
    ColorSpace.RGBA,
    ColorSpace.SRGBA,
    ColorSpace.HSBA,
    ColorSpace.WEBA,
    ColorSpace.HEXA,
}

space_format_types = {
    ColorSpace.RGB: FormatType.INT,
    ColorSpace.SRGB: FormatType.FLOAT,
    ColorSpace.HSB: FormatType.FLOAT,
    ColorSpace.WEB: FormatType.HEX,
    ColorSpace.HEX: FormatType.HEX,
}
