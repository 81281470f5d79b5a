"""Data model for text components: colors, events, styles and the component tree."""

from typewheel.models.color import (
    Color,
    HexColor,
    NamedColor,
    format_color,
    from_legacy_code,
    parse_color,
)
from typewheel.models.component import (
    Component,
    Content,
    EmptyContent,
    IterOrder,
    KeybindContent,
    ScoreContent,
    Segment,
    SelectorContent,
    TextContent,
    TranslatableContent,
    Visit,
    VisitKind,
)
from typewheel.models.event import (
    ChangePage,
    ClickEvent,
    CopyToClipboard,
    HoverEvent,
    OpenUrl,
    RunCommand,
    ShowEntity,
    ShowItem,
    ShowText,
    SuggestCommand,
)
from typewheel.models.key import Key
from typewheel.models.style import Style

__all__ = [
    "ChangePage",
    "ClickEvent",
    "Color",
    "Component",
    "Content",
    "CopyToClipboard",
    "EmptyContent",
    "HexColor",
    "HoverEvent",
    "IterOrder",
    "Key",
    "KeybindContent",
    "NamedColor",
    "OpenUrl",
    "RunCommand",
    "ScoreContent",
    "Segment",
    "SelectorContent",
    "ShowEntity",
    "ShowItem",
    "ShowText",
    "Style",
    "SuggestCommand",
    "TextContent",
    "TranslatableContent",
    "Visit",
    "VisitKind",
    "format_color",
    "from_legacy_code",
    "parse_color",
]
