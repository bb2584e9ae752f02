from __future__ import annotations
from enum import Enum

from ..errors import ParseError


class _KeywordEnum(str, Enum):
    """String enum parsed leniently from host keywords.

    An empty keyword selects the first member, which is the default.
    """

    @classmethod
    def parse(cls, keyword):
        if isinstance(keyword, cls):
            return keyword
        text = "" if keyword is None else str(keyword).strip().lower()
        if not text:
            return next(iter(cls))
        text = _KEYWORD_ALIASES.get(text, text)
        try:
            return cls(text)
        except ValueError:
            choices = ", ".join(repr(member.value) for member in cls)
            raise ParseError(
                f"Unrecognised {cls.__name__.lower()} {keyword!r}; expected one of {choices}"
            ) from None


class Modifier(_KeywordEnum):
    """Mutually exclusive post-interpolation adjustment."""
    NONE = "none"
    BRIGHTER = "brighter"
    DARKER = "darker"
    SATURATED = "saturated"
    DESATURATED = "desaturated"


class Spacing(_KeywordEnum):
    """How N points are laid out between the start and end colors.

    INCLUSIVE: fractions (i+1)/N, the last point is the end color.
    INTERIOR:  fractions (i+1)/(N+1), all points strictly between.
    """
    INCLUSIVE = "inclusive"
    INTERIOR = "interior"


class GrayscaleMode(_KeywordEnum):
    LUMA = "luma"
    LEGACY_INVERT = "legacy_invert"


_KEYWORD_ALIASES = {
    "saturate": "saturated",
    "desaturate": "desaturated",
    "legacy": "legacy_invert",
    "invert": "legacy_invert",
}
