"""
TEST DOC: Color Model

WHAT: Tests for NamedColor, HexColor and the color parsing helpers.
WHY: Colors cross every boundary (JSON names, '#RRGGBB' strings, legacy codes),
     so each conversion must be exact and reversible.
HOW: Parametrize over the whole palette; check parse errors by exception type.

CASES:
- Every palette color maps to a legacy code and back
- Hex colors have no legacy code
- Palette names and '#RRGGBB' strings parse
- Hex colors format as uppercase '#RRGGBB'

EDGE CASES:
- Lowercase hex digits
- Out-of-range and non-int hex values
- Uppercase legacy codes
- Nearest palette color for arbitrary RGB
"""

import pytest

from typewheel.errors import (
    ColorParseError,
    MalformedHexColor,
    ParseError,
    UnknownColorCode,
    UnknownColorName,
)
from typewheel.models.color import (
    HexColor,
    NamedColor,
    format_color,
    from_legacy_code,
    parse_color,
)

PALETTE_CODES = "0123456789abcdef"


class TestLegacyCodes:
    """Tests for legacy code conversion."""

    @pytest.mark.parametrize("code", list(PALETTE_CODES))
    def test_code_round_trip(self, code):
        """Every palette code maps to a color and back to itself."""
        assert from_legacy_code(code).to_legacy_code() == code

    def test_all_sixteen_colors_have_distinct_codes(self):
        """The palette is a bijection onto 0-9a-f."""
        codes = {color.to_legacy_code() for color in NamedColor}
        assert codes == set(PALETTE_CODES)

    def test_specific_code(self):
        """'c' is red."""
        assert from_legacy_code("c") is NamedColor.RED

    def test_uppercase_code(self):
        """Legacy codes are case-insensitive."""
        assert from_legacy_code("C") is NamedColor.RED

    @pytest.mark.parametrize("code", ["g", "l", "r", "", "ab"])
    def test_unknown_code(self, code):
        """Non-palette characters raise UnknownColorCode."""
        with pytest.raises(UnknownColorCode):
            from_legacy_code(code)

    def test_hex_has_no_code(self):
        """Hex colors cannot be written as a legacy code."""
        assert HexColor(0x123456).to_legacy_code() is None


class TestHexColor:
    """Tests for HexColor."""

    def test_format_uppercase(self):
        """Hex colors format as '#RRGGBB' with uppercase digits."""
        assert str(HexColor(0xABCDEF)) == "#ABCDEF"

    def test_format_pads_zeros(self):
        """Small values are zero-padded to six digits."""
        assert str(HexColor(0x0000FF)) == "#0000FF"

    def test_parse_lowercase(self):
        """Hex digits are accepted in either case."""
        assert HexColor.parse("#abcdef") == HexColor(0xABCDEF)

    @pytest.mark.parametrize("text", ["#12345", "#1234567", "123456", "#GGGGGG", "#"])
    def test_parse_malformed(self, text):
        """Wrong length or non-hex digits raise MalformedHexColor."""
        with pytest.raises(MalformedHexColor):
            HexColor.parse(text)

    def test_rgb_channels(self):
        """The most significant byte is red."""
        assert HexColor(0x123456).rgb == (0x12, 0x34, 0x56)

    @pytest.mark.parametrize("value", [-1, 0x1000000])
    def test_out_of_range(self, value):
        """Values outside 24 bits are rejected."""
        with pytest.raises(ValueError):
            HexColor(value)

    def test_bool_rejected(self):
        """A bool is not a color value."""
        with pytest.raises(ValueError):
            HexColor(True)

    def test_nearest_named_exact(self):
        """A hex value equal to a palette entry maps to that entry."""
        assert HexColor(0xFF5555).nearest_named() is NamedColor.RED

    def test_nearest_named_approximate(self):
        """Near-white maps to white."""
        assert HexColor(0xFEFEFE).nearest_named() is NamedColor.WHITE


class TestParseColor:
    """Tests for parse_color and format_color."""

    def test_named(self):
        """Palette names parse to NamedColor."""
        assert parse_color("dark_purple") is NamedColor.DARK_PURPLE

    def test_hex(self):
        """'#' strings parse to HexColor."""
        assert parse_color("#00FF00") == HexColor(0x00FF00)

    def test_hex_matching_palette_stays_hex(self):
        """A hex value equal to a palette color is not normalized."""
        assert parse_color("#FF5555") == HexColor(0xFF5555)

    def test_unknown_name(self):
        """Unknown names raise UnknownColorName, also a ParseError and ValueError."""
        with pytest.raises(UnknownColorName) as exc_info:
            parse_color("reddish")
        assert isinstance(exc_info.value, ColorParseError)
        assert isinstance(exc_info.value, ParseError)
        assert isinstance(exc_info.value, ValueError)

    def test_malformed_hex(self):
        """Malformed hex strings raise MalformedHexColor."""
        with pytest.raises(MalformedHexColor):
            parse_color("#XYZ")

    @pytest.mark.parametrize("text", ["gold", "light_purple", "#0A0B0C"])
    def test_format_parse_round_trip(self, text):
        """format_color inverts parse_color for canonical strings."""
        assert format_color(parse_color(text)) == text
