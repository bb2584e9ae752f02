"""
Host string → Color parsing.

Numeric spaces take whitespace or comma separated tokens. Web and hex
spaces take a hex token and an optional decimal opacity token::

    parse_color("197 115 47", "rgb")
    parse_color("197, 115, 47", "rgb")
    parse_color("#c5732f 0.5", "weba")
"""
from __future__ import annotations
import logging
import math
import re
from typing import List

from ..colors import Color
from ..constants import MAX_BYTE
from ..errors import ArityError, ParseError, RangeError
from ..types.color_space import ColorSpace, FormatType

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")


def tokenize(raw: str) -> List[str]:
    """Split a host value on whitespace and commas, dropping empty tokens."""
    if raw is None:
        return []
    return [token for token in _SEPARATORS.split(str(raw).strip()) if token]


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ParseError(f"Expected an integer, got {token!r}") from None


def _parse_float(token: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise ParseError(f"Expected a number, got {token!r}") from None
    if not math.isfinite(value):
        raise ParseError(f"Expected a finite number, got {token!r}")
    return value


def _check_arity(tokens: List[str], space: ColorSpace, expected: tuple[int, ...]) -> None:
    if len(tokens) not in expected:
        wanted = " or ".join(str(n) for n in expected)
        raise ArityError(
            f"{space.value} expects {wanted} value(s), got {len(tokens)}: {' '.join(tokens)!r}"
        )


def _parse_hex(tokens: List[str], space: ColorSpace) -> Color:
    _check_arity(tokens, space, (1, 2))
    opacity = _parse_float(tokens[1]) if len(tokens) == 2 else None
    return Color.web(tokens[0], opacity)


def _parse_numeric(tokens: List[str], space: ColorSpace) -> Color:
    _check_arity(tokens, space, (space.num_channels,))

    if space.format_type == FormatType.INT:
        values = [_parse_int(t) for t in tokens]
        for name, value in zip(("red", "green", "blue", "alpha"), values):
            if not 0 <= value <= MAX_BYTE:
                raise RangeError(f"{name} {value!r} outside [0, {MAX_BYTE}]")
        # an rgba alpha byte is taken unscaled as opacity
        return Color.from_components(values, space)

    values = [_parse_float(t) for t in tokens]
    if space.base == ColorSpace.HSB:
        return Color.hsb(*values)
    return Color.color(*values)


def parse_color(raw: str, space: ColorSpace | str) -> Color:
    """
    Parse a host string into a Color.

    Args:
        raw: space/comma delimited components, or a hex token for web spaces
        space: one of rgb, rgba, srgb, srgba, hsb, hsba, web, weba, hex, hexa

    Raises:
        UnsupportedSpaceError: unknown space tag
        ArityError: wrong number of tokens for the space
        ParseError: malformed number or hex string
        RangeError: a component outside its domain
    """
    space = ColorSpace.parse(space)
    tokens = tokenize(raw)

    if space.is_hex:
        color = _parse_hex(tokens, space)
    else:
        color = _parse_numeric(tokens, space)

    logger.debug("Parsed %r as %s -> %r", raw, space.value, color)
    return color
