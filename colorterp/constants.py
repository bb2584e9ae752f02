# Factors used by the host platform's derived colors
DARKER_BRIGHTER_FACTOR = 0.7
SATURATE_DESATURATE_FACTOR = 0.7

# Base brightness used when brightening pure black
BLACK_BRIGHTEN_FLOOR = 0.05

# Rec. 709 luma weights of the grayscale projection (r, g, b), summing to 1
GRAYSCALE_WEIGHTS = (0.2126, 0.7152, 0.0722)

HUE_360 = 360.0
MAX_BYTE = 255

# Host macro names
MACRO_INPUT_SPACE = "icspace"
MACRO_OUTPUT_SPACE = "rcspace"
MACRO_START_COLOR = "scolor"
MACRO_END_COLOR = "ecolor"
MACRO_POINTS = "icolors"
MACRO_MODIFIER = "luminance"
MACRO_INVERT = "inverse"
MACRO_GRAYSCALE = "grayscale"
MACRO_SPACING = "spacing"
MACRO_INCLUDE_START = "includestart"
MACRO_GRAYSCALE_MODE = "graymode"

RESULT_PREFIX = "color"

TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})
