"""
color.py

PURPOSE: Text colors: the 16-entry legacy palette and arbitrary RGB values.
DEPENDENCIES: None (pure Python + enum)

ARCHITECTURE NOTES:
A color is either a NamedColor (palette entry) or a HexColor (24-bit RGB).
Every named color maps to exactly one legacy formatting character and one
canonical hex value. Parsing never normalizes a hex value into a palette
entry, so decoded input keeps the representation it was written in.

Palette:
    code  name           hex
    0     black          #000000
    1     dark_blue      #0000AA
    2     dark_green     #00AA00
    3     dark_aqua      #00AAAA
    4     dark_red       #AA0000
    5     dark_purple    #AA00AA
    6     gold           #FFAA00
    7     gray           #AAAAAA
    8     dark_gray      #555555
    9     blue           #5555FF
    a     green          #55FF55
    b     aqua           #55FFFF
    c     red            #FF5555
    d     light_purple   #FF55FF
    e     yellow         #FFFF55
    f     white          #FFFFFF
"""

import re
from dataclasses import dataclass
from enum import Enum

from typewheel.errors import MalformedHexColor, UnknownColorCode, UnknownColorName

MAX_RGB = 0xFFFFFF

HEX_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


class NamedColor(str, Enum):
    """One of the 16 fixed palette colors. The value is the wire name."""

    BLACK = "black"
    DARK_BLUE = "dark_blue"
    DARK_GREEN = "dark_green"
    DARK_AQUA = "dark_aqua"
    DARK_RED = "dark_red"
    DARK_PURPLE = "dark_purple"
    GOLD = "gold"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    BLUE = "blue"
    GREEN = "green"
    AQUA = "aqua"
    RED = "red"
    LIGHT_PURPLE = "light_purple"
    YELLOW = "yellow"
    WHITE = "white"

    def to_legacy_code(self) -> str:
        """The single legacy formatting character for this color."""
        return _PALETTE[self][0]

    def as_hex(self) -> int:
        """The canonical 24-bit RGB value for this color."""
        return _PALETTE[self][1]

    def __str__(self) -> str:
        return self.value


# NamedColor -> (legacy code, canonical rgb)
_PALETTE: dict[NamedColor, tuple[str, int]] = {
    NamedColor.BLACK: ("0", 0x000000),
    NamedColor.DARK_BLUE: ("1", 0x0000AA),
    NamedColor.DARK_GREEN: ("2", 0x00AA00),
    NamedColor.DARK_AQUA: ("3", 0x00AAAA),
    NamedColor.DARK_RED: ("4", 0xAA0000),
    NamedColor.DARK_PURPLE: ("5", 0xAA00AA),
    NamedColor.GOLD: ("6", 0xFFAA00),
    NamedColor.GRAY: ("7", 0xAAAAAA),
    NamedColor.DARK_GRAY: ("8", 0x555555),
    NamedColor.BLUE: ("9", 0x5555FF),
    NamedColor.GREEN: ("a", 0x55FF55),
    NamedColor.AQUA: ("b", 0x55FFFF),
    NamedColor.RED: ("c", 0xFF5555),
    NamedColor.LIGHT_PURPLE: ("d", 0xFF55FF),
    NamedColor.YELLOW: ("e", 0xFFFF55),
    NamedColor.WHITE: ("f", 0xFFFFFF),
}

LEGACY_CODES: dict[str, NamedColor] = {code: color for color, (code, _) in _PALETTE.items()}


@dataclass(frozen=True)
class HexColor:
    """
    An arbitrary RGB color.

    The most significant byte is the red channel, then green, then blue.
    Formatted as an uppercase '#RRGGBB' string.
    """

    value: int

    def __post_init__(self) -> None:
        """Validate the channel range."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"HexColor value must be an int, got {type(self.value).__name__}")
        if not 0 <= self.value <= MAX_RGB:
            raise ValueError(f"HexColor value {self.value:#x} is outside 0x000000..0xFFFFFF")

    def to_legacy_code(self) -> None:
        """Hex colors have no legacy code."""
        return None

    def as_hex(self) -> int:
        return self.value

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The (red, green, blue) channels."""
        return (self.value >> 16) & 0xFF, (self.value >> 8) & 0xFF, self.value & 0xFF

    def nearest_named(self) -> NamedColor:
        """The palette color with the smallest RGB distance to this one."""
        red, green, blue = self.rgb

        def distance(color: NamedColor) -> int:
            other = color.as_hex()
            dr = red - ((other >> 16) & 0xFF)
            dg = green - ((other >> 8) & 0xFF)
            db = blue - (other & 0xFF)
            return dr * dr + dg * dg + db * db

        return min(NamedColor, key=distance)

    @classmethod
    def parse(cls, text: str) -> "HexColor":
        """
        Parse a '#RRGGBB' string (digits are case-insensitive).

        Raises:
            MalformedHexColor: If the string is not exactly '#' plus 6 hex digits
        """
        if not HEX_PATTERN.match(text):
            raise MalformedHexColor(text)
        return cls(int(text[1:], 16))

    def __str__(self) -> str:
        return f"#{self.value:06X}"


Color = NamedColor | HexColor


def from_legacy_code(code: str) -> NamedColor:
    """
    Look up the palette color for a legacy formatting character.

    Raises:
        UnknownColorCode: If the character is not 0-9 or a-f
    """
    color = LEGACY_CODES.get(code.lower()) if len(code) == 1 else None
    if color is None:
        raise UnknownColorCode(code)
    return color


def parse_color(text: str) -> Color:
    """
    Parse either textual form used on the wire: a palette name or '#RRGGBB'.

    Raises:
        MalformedHexColor: For '#' strings with bad length or digits
        UnknownColorName: For any other string that is not a palette name
    """
    if text.startswith("#"):
        return HexColor.parse(text)
    try:
        return NamedColor(text)
    except ValueError:
        raise UnknownColorName(text) from None


def format_color(color: Color) -> str:
    """Format a color the way the wire format expects it."""
    return str(color)
