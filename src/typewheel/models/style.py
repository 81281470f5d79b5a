"""
style.py

PURPOSE: Formatting and interactivity attributes attached to a component.
DEPENDENCIES: pydantic, color, event

ARCHITECTURE NOTES:
Every attribute is optional. None means "unset" and is inherited from an
ancestor when a tree is flattened; an explicit value (including False)
overrides inheritance. Inheritance is computed with merge() while walking
the tree, so components never hold a reference to their parent.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool

from typewheel.models.color import Color, HexColor, NamedColor
from typewheel.models.event import ClickEvent, HoverEvent

# Attribute order matches the order the codec writes them in
STYLE_ATTRIBUTES: tuple[str, ...] = (
    "color",
    "bold",
    "italic",
    "underlined",
    "strikethrough",
    "obfuscated",
    "font",
    "insertion",
    "click_event",
    "hover_event",
)

FORMAT_FLAGS: tuple[str, ...] = ("bold", "italic", "underlined", "strikethrough", "obfuscated")


class Style(BaseModel):
    """
    The set of optional style attributes of one component.

    Attributes are read and assigned directly (assignment is validated).
    The with_* builders return a modified copy instead.
    """

    model_config = ConfigDict(validate_assignment=True)

    color: NamedColor | HexColor | None = None
    bold: StrictBool | None = None
    italic: StrictBool | None = None
    underlined: StrictBool | None = None
    strikethrough: StrictBool | None = None
    obfuscated: StrictBool | None = None
    font: str | None = None
    insertion: str | None = None
    click_event: ClickEvent | None = None
    hover_event: HoverEvent | None = None

    @classmethod
    def reset(cls) -> "Style":
        """A style with every formatting flag explicitly switched off."""
        return cls(**{flag: False for flag in FORMAT_FLAGS})

    def is_empty(self) -> bool:
        """True if every attribute is unset."""
        return all(getattr(self, name) is None for name in STYLE_ATTRIBUTES)

    def merge(self, parent: "Style") -> "Style":
        """
        Resolve inheritance against a parent style.

        For each attribute the child's value wins when set; otherwise the
        parent's value (possibly unset itself) is used.

        Args:
            parent: The already-resolved style of the enclosing component

        Returns:
            A new Style; neither input is modified
        """
        merged: dict[str, Any] = {}
        for name in STYLE_ATTRIBUTES:
            value = getattr(self, name)
            merged[name] = value if value is not None else getattr(parent, name)
        return Style.model_construct(**merged)

    def replace(self, **changes: Any) -> "Style":
        """Return a copy with the given attributes changed (validated)."""
        values = {name: getattr(self, name) for name in STYLE_ATTRIBUTES}
        values.update(changes)
        return Style(**values)

    def with_color(self, color: Color | None) -> "Style":
        return self.replace(color=color)

    def with_bold(self, bold: bool | None) -> "Style":
        return self.replace(bold=bold)

    def with_italic(self, italic: bool | None) -> "Style":
        return self.replace(italic=italic)

    def with_underlined(self, underlined: bool | None) -> "Style":
        return self.replace(underlined=underlined)

    def with_strikethrough(self, strikethrough: bool | None) -> "Style":
        return self.replace(strikethrough=strikethrough)

    def with_obfuscated(self, obfuscated: bool | None) -> "Style":
        return self.replace(obfuscated=obfuscated)

    def with_font(self, font: str | None) -> "Style":
        return self.replace(font=font)

    def with_insertion(self, insertion: str | None) -> "Style":
        return self.replace(insertion=insertion)

    def with_click_event(self, event: ClickEvent | None) -> "Style":
        return self.replace(click_event=event)

    def with_hover_event(self, event: HoverEvent | None) -> "Style":
        return self.replace(hover_event=event)
