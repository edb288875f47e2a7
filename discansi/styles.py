"""The closed set of style codes understood by the chat renderer.

Codes fall into three bands. Decorations (< 30) change the weight or
decoration of text, foreground colors are 30-37 and background colors are
40-47. A range carries at most one value per band.
"""

from enum import Enum
from typing import Optional


class InvalidStyleError(ValueError):
    """Raised for a style code outside the supported set."""


class Band(Enum):
    DECORATION = "decoration"
    FOREGROUND = "foreground"
    BACKGROUND = "background"


RESET = 0
BOLD = 1
ITALIC = 3
UNDERLINE = 4
STRIKE = 9

DECORATION_CODES = (RESET, BOLD, ITALIC, UNDERLINE, STRIKE)
FOREGROUND_CODES = tuple(range(30, 38))
BACKGROUND_CODES = tuple(range(40, 48))
ALL_CODES = frozenset(DECORATION_CODES + FOREGROUND_CODES + BACKGROUND_CODES)

_NAMES = {
    RESET: "Reset",
    BOLD: "Bold",
    ITALIC: "Italic",
    UNDERLINE: "Underline",
    STRIKE: "Strike",
    30: "Dark Gray (33%)",
    31: "Red",
    32: "Yellowish Green",
    33: "Gold",
    34: "Light Blue",
    35: "Pink",
    36: "Teal",
    37: "White",
    40: "Blueish Black",
    41: "Rust Brown",
    42: "Gray (40%)",
    43: "Gray (45%)",
    44: "Light Gray (55%)",
    45: "Blurple",
    46: "Light Gray (60%)",
    47: "Cream White",
}

# Approximation of how the chat client paints each color
_SWATCHES = {
    30: "#4f545c",
    31: "#dc322f",
    32: "#859900",
    33: "#b58900",
    34: "#268bd2",
    35: "#d33682",
    36: "#2aa198",
    37: "#ffffff",
    40: "#002b36",
    41: "#cb4b16",
    42: "#586e75",
    43: "#657b83",
    44: "#839496",
    45: "#6c71c4",
    46: "#93a1a1",
    47: "#fdf6e3",
}


def band_of(code: int) -> Band:
    """Return the band a code belongs to."""
    if code < 30:
        return Band.DECORATION
    if code < 40:
        return Band.FOREGROUND
    return Band.BACKGROUND


def is_valid(code: int) -> bool:
    return code in ALL_CODES


def validate(code: int) -> int:
    """Return ``code`` unchanged, or raise InvalidStyleError.

    Args:
        code: Candidate style code

    Returns:
        The same code, for use in expressions

    Raises:
        InvalidStyleError: If the code is not part of the fixed set
    """
    if isinstance(code, bool) or not isinstance(code, int) or not is_valid(code):
        raise InvalidStyleError(f"Unsupported style code: {code!r}")
    return code


def style_name(code: int) -> str:
    """Human-readable label for a code, used by the user interface."""
    return _NAMES[validate(code)]


def swatch(code: int) -> Optional[str]:
    """Hex color used to preview a color code, None for decorations."""
    return _SWATCHES.get(validate(code))
