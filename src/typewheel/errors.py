"""
errors.py

PURPOSE: Exception types raised by the models and codecs.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
All errors derive from TypewheelError so callers can catch the whole family.
Decode errors carry the JSON path of the value that failed, which makes
malformed input from a server or a config file easy to locate.
"""


class TypewheelError(Exception):
    """Base class for every error raised by typewheel."""

    pass


class ParseError(TypewheelError, ValueError):
    """A textual value (color name, hex string, legacy code) could not be parsed."""

    pass


class UnknownColorCode(ParseError):
    """A legacy formatting character does not name one of the 16 palette colors."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown legacy color code {code!r}")


class ColorParseError(ParseError):
    """A color string is neither a palette name nor a #RRGGBB value."""

    def __init__(self, text: str, reason: str):
        self.text = text
        super().__init__(f"Invalid color {text!r}: {reason}")


class UnknownColorName(ColorParseError):
    """A bare color string is not one of the palette names."""

    def __init__(self, text: str):
        super().__init__(text, "not a named color")


class MalformedHexColor(ColorParseError):
    """A '#' color string has the wrong length or contains non-hex digits."""

    def __init__(self, text: str):
        super().__init__(text, "expected '#RRGGBB'")


class FeatureDisabled(TypewheelError):
    """A capability flag required by the requested operation is switched off."""

    pass


class CodecError(TypewheelError):
    """Base class for encode/decode failures."""

    pass


class DecodeError(CodecError):
    """
    The JSON input does not describe a valid component.

    Attributes:
        message: What went wrong
        path: JSON path of the offending value, e.g. "$.extra[0].bold"
    """

    def __init__(self, message: str, path: str = "$"):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}")


class TypeMismatch(DecodeError):
    """A JSON value has the wrong type (e.g. a string where a boolean belongs)."""

    pass


class UnknownVariant(DecodeError):
    """A discriminator (such as an event "action") names no known variant."""

    pass


class MissingField(DecodeError):
    """A required JSON key is absent."""

    pass


class InvalidValue(DecodeError):
    """A JSON value has the right type but cannot be interpreted (bad color, bad uuid)."""

    pass


class MalformedJson(DecodeError):
    """The input text is not valid JSON at all."""

    pass


class UnsupportedVariant(DecodeError):
    """
    A known variant that is gated behind a capability flag was used while the
    flag is off. Raised on decode, on encode and on construction.
    """

    pass
