"""
plain.py

PURPOSE: Encode components as unformatted text.
DEPENDENCIES: models

ARCHITECTURE NOTES:
One-way in practice: encoding keeps only the flattened text (translations
show their fallback or key, keybinds their identifier, scores their value),
and decoding can only ever produce a single text component.
"""

from typewheel.codec.base import ComponentCodec
from typewheel.models.component import Component


class PlainTextCodec(ComponentCodec[str]):
    """Codec that drops all styling."""

    def encode(self, component: Component) -> str:
        return component.plain_text()

    def decode(self, value: str) -> Component:
        return Component.text(value)
