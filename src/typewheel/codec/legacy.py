"""
legacy.py

PURPOSE: Convert components to and from legacy control-code strings.
DEPENDENCIES: models

ARCHITECTURE NOTES:
The legacy format is a string where a control character (the section sign,
or '&' in many config files) followed by one code switches formatting:

    0-9, a-f   palette colors (see models/color.py)
    k          obfuscated
    l          bold
    m          strikethrough
    n          underlined
    o          italic
    r          reset

A color code also clears every formatting flag, which is why the encoder
re-emits active flags after each color. The format is lossy: fonts,
insertions, events and hex precision (hex colors are downsampled to the
nearest palette color) cannot be expressed.
"""

import re
from typing import ClassVar, NamedTuple

from typewheel.codec.base import ComponentCodec
from typewheel.models.color import LEGACY_CODES, HexColor, NamedColor
from typewheel.models.component import Component
from typewheel.models.style import Style

SECTION_SIGN = "§"

RESET_CODE = "r"

# Flag -> code, in the order codes are written
FORMAT_CODES: dict[str, str] = {
    "bold": "l",
    "italic": "o",
    "underlined": "n",
    "strikethrough": "m",
    "obfuscated": "k",
}

CODE_FLAGS: dict[str, str] = {code: flag for flag, code in FORMAT_CODES.items()}


class _LegacyState(NamedTuple):
    """What a legacy string can express about a style."""

    color: NamedColor | None
    flags: frozenset[str]

    @classmethod
    def from_style(cls, style: Style) -> "_LegacyState":
        color = style.color
        if isinstance(color, HexColor):
            color = color.nearest_named()
        flags = frozenset(flag for flag in FORMAT_CODES if getattr(style, flag) is True)
        return cls(color, flags)


_PLAIN = _LegacyState(None, frozenset())


class LegacyCodec(ComponentCodec[str]):
    """
    Codec for legacy control-code strings.

    Usage:
        LegacyCodec.SECTION.encode(Component.text("hi").with_bold(True))  # "§lhi"
        LegacyCodec.AMPERSAND.decode("&cred &lbold")
    """

    SECTION: ClassVar["LegacyCodec"]
    AMPERSAND: ClassVar["LegacyCodec"]

    def __init__(self, control: str = SECTION_SIGN):
        if len(control) != 1:
            raise ValueError(f"Control character must be a single character, got {control!r}")
        self.control = control
        self._code_pattern = re.compile(re.escape(control) + r"[0-9a-fk-orA-FK-OR]")

    def encode(self, component: Component) -> str:
        """
        Encode a component tree, emitting codes only where the style changes.

        Segments with empty text are skipped.
        """
        parts: list[str] = []
        current = _PLAIN

        for segment in component.flatten():
            if not segment.text:
                continue
            target = _LegacyState.from_style(segment.style)
            parts.append(self._transition(current, target))
            parts.append(segment.text)
            current = target

        return "".join(parts)

    def _transition(self, current: _LegacyState, target: _LegacyState) -> str:
        """Codes that turn the `current` rendering state into `target`."""
        if current == target:
            return ""

        # Flags can only be switched off by a color or reset code
        if target.color != current.color or current.flags - target.flags:
            lead = target.color.to_legacy_code() if target.color else RESET_CODE
            codes = [lead] + [code for flag, code in FORMAT_CODES.items() if flag in target.flags]
        else:
            codes = [
                code
                for flag, code in FORMAT_CODES.items()
                if flag in target.flags and flag not in current.flags
            ]

        return "".join(self.control + code for code in codes)

    def decode(self, value: str) -> Component:
        """
        Decode a legacy string.

        A color code starts a fresh style holding only that color, a format
        code adds its flag, and a reset code clears everything. Unknown codes
        and a trailing control character are kept as literal text.

        Returns:
            A single text component for a single run of text, otherwise a
            component with no content whose children are the runs
        """
        runs: list[Component] = []
        style = Style()
        buffer: list[str] = []

        def flush() -> None:
            if buffer:
                runs.append(Component.text("".join(buffer)).with_style(style))
                buffer.clear()

        i = 0
        while i < len(value):
            char = value[i]
            if char == self.control and i + 1 < len(value):
                next_style = self._apply_code(style, value[i + 1].lower())
                if next_style is not None:
                    flush()
                    style = next_style
                    i += 2
                    continue
            buffer.append(char)
            i += 1
        flush()

        if not runs:
            return Component.text("")
        if len(runs) == 1:
            return runs[0]
        return Component.empty().append(runs)

    def _apply_code(self, style: Style, code: str) -> Style | None:
        """The style after applying one code, or None if the code is unknown."""
        if code in LEGACY_CODES:
            return Style(color=LEGACY_CODES[code])
        if code in CODE_FLAGS:
            return style.replace(**{CODE_FLAGS[code]: True})
        if code == RESET_CODE:
            return Style()
        return None

    def strip(self, value: str) -> str:
        """Remove every recognized control code, keeping the text."""
        return self._code_pattern.sub("", value)


LegacyCodec.SECTION = LegacyCodec(SECTION_SIGN)
LegacyCodec.AMPERSAND = LegacyCodec("&")
