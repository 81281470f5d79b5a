"""
TEST DOC: Plain Text Codec

WHAT: Tests for PlainTextCodec.
WHY: Plain text is what logs, consoles and search indexes want.

CASES:
- Encoding concatenates the flattened text
- Decoding builds one unstyled text component

EDGE CASES:
- Legacy codes are not interpreted on decode
"""

from typewheel.codec.plain import PlainTextCodec
from typewheel.models.component import Component


class TestPlainTextCodec:
    """Tests for PlainTextCodec."""

    def test_encode_drops_style(self, styled_hello):
        """Styling is discarded."""
        assert PlainTextCodec().encode(styled_hello) == "hello world"

    def test_encode_order(self, deeply_nested):
        """Text comes out in document order."""
        assert PlainTextCodec().encode(deeply_nested) == "abcdefg"

    def test_encode_non_text_content(self):
        """Non-text content contributes its fallback text."""
        component = Component.text("Press ").append(
            [Component.keybind("key.jump"), " for ", Component.translatable("k", fallback="jump")]
        )
        assert PlainTextCodec().encode(component) == "Press key.jump for jump"

    def test_decode(self):
        """Decoding produces a single text component."""
        assert PlainTextCodec().decode("hello") == Component.text("hello")

    def test_decode_keeps_codes(self):
        """Legacy codes are ordinary characters to this codec."""
        assert PlainTextCodec().decode("§cred").shallow_text() == "§cred"
