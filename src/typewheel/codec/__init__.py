"""Codecs that convert component trees to and from external formats."""

from typewheel.codec.base import ComponentCodec
from typewheel.codec.json import JsonCodec, decode, encode
from typewheel.codec.legacy import LegacyCodec
from typewheel.codec.plain import PlainTextCodec

__all__ = [
    "ComponentCodec",
    "JsonCodec",
    "LegacyCodec",
    "PlainTextCodec",
    "decode",
    "encode",
]
