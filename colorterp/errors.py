"""Error taxonomy for color parsing, interpolation and formatting.

Every error is fatal to a single invocation: nothing is written back to the
host when one of these is raised.
"""


class ColorTerpError(ValueError):
    """Base class for all colorterp input errors."""


class ParseError(ColorTerpError):
    """A token is not a number, not valid hex, or not a recognised keyword."""


class ArityError(ColorTerpError):
    """The number of tokens does not match the declared color space."""


class UnsupportedSpaceError(ColorTerpError):
    """The color space tag is not one of the supported tags."""


class RangeError(ColorTerpError):
    """A numeric value lies outside the valid domain of its channel."""
