"""
Typewheel - Build, style, flatten and serialize Minecraft-style text components.

This package provides tools for:
- Building component trees with inherited styles
- Flattening trees into styled text segments
- Converting components to and from JSON, legacy codes and plain text
"""

from typewheel.codec import JsonCodec, LegacyCodec, PlainTextCodec, decode, encode
from typewheel.models import Component, HexColor, Key, NamedColor, Style

__version__ = "0.1.0"

__all__ = [
    "Component",
    "HexColor",
    "JsonCodec",
    "Key",
    "LegacyCodec",
    "NamedColor",
    "PlainTextCodec",
    "Style",
    "decode",
    "encode",
]
