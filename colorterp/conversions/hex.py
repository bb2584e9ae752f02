import re

import numpy as np
from numpy import ndarray as NDArray

from ..constants import MAX_BYTE
from ..errors import ParseError

HEX_REGEX = re.compile(r"^(?:#|0x)?([0-9a-f]{3,8})$", re.IGNORECASE)
_HEX_LENGTHS = (3, 4, 6, 8)


def unit_to_byte(values) -> NDArray:
    """Round unit channel values half up to bytes, capped at 255."""
    scaled = np.floor(np.asarray(values, dtype=float) * MAX_BYTE + 0.5)
    return np.clip(scaled, 0, MAX_BYTE).astype(int)


def byte_to_hex(byte: int) -> str:
    """Two lowercase hex digits, zero padded."""
    return f"{int(byte):02x}"


def bytes_to_hex(values, prefix: str = "") -> str:
    return prefix + "".join(byte_to_hex(b) for b in values)


def hex_to_bytes(token: str) -> tuple[tuple[int, int, int], int | None]:
    """
    Decode a web hex token into its RGB bytes and optional alpha byte.

    Accepts an optional ``#`` or ``0x`` prefix followed by 3, 4, 6 or 8 hex
    digits. The 3 and 4 digit shorthands double every digit.

    Returns:
        ((r, g, b), alpha) where alpha is None when the token has no alpha byte.
    """
    match = HEX_REGEX.match(token.strip())
    if match is None or len(match.group(1)) not in _HEX_LENGTHS:
        raise ParseError(f"Malformed hexadecimal color {token!r}")

    digits = match.group(1)
    if len(digits) <= 4:
        digits = "".join(d * 2 for d in digits)

    values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    alpha = values[3] if len(values) == 4 else None
    return (values[0], values[1], values[2]), alpha
