"""
console.py

PURPOSE: Render components and messages on the terminal.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
Components are rendered by flattening them and appending each segment to a
rich Text with an equivalent rich Style:
- palette and hex colors become truecolor values
- bold / italic / underlined / strikethrough map one to one
- obfuscated has no terminal equivalent and is shown as blink
- open_url click events become terminal hyperlinks
"""

from rich.console import Console
from rich.style import Style as RichStyle
from rich.table import Table
from rich.text import Text

from typewheel.models.component import Component
from typewheel.models.event import OpenUrl
from typewheel.models.style import Style

# Global console instance
console = Console()


def to_rich_style(style: Style) -> RichStyle:
    """Translate an effective component style into a rich style."""
    link = style.click_event.value if isinstance(style.click_event, OpenUrl) else None
    return RichStyle(
        color=f"#{style.color.as_hex():06x}" if style.color is not None else None,
        bold=style.bold,
        italic=style.italic,
        underline=style.underlined,
        strike=style.strikethrough,
        blink=style.obfuscated,
        link=link,
    )


def to_rich_text(component: Component) -> Text:
    """Render a component tree as a single styled rich Text."""
    text = Text()
    for segment in component.flatten():
        if segment.text:
            text.append(segment.text, style=to_rich_style(segment.style))
    return text


def describe_style(style: Style) -> str:
    """Short human-readable summary of the set attributes of a style."""
    parts = []
    if style.color is not None:
        parts.append(str(style.color))
    for flag in ("bold", "italic", "underlined", "strikethrough", "obfuscated"):
        value = getattr(style, flag)
        if value is not None:
            parts.append(flag if value else f"!{flag}")
    if style.font is not None:
        parts.append(f"font={style.font}")
    if style.insertion is not None:
        parts.append(f"insertion={style.insertion}")
    if style.click_event is not None:
        parts.append(f"click={style.click_event.action}")
    if style.hover_event is not None:
        parts.append(f"hover={style.hover_event.action}")
    return " ".join(parts)


def print_component(component: Component) -> None:
    """Print a component with terminal styling."""
    console.print(to_rich_text(component))


def print_segments(component: Component) -> None:
    """Print the flattened segments of a component as a table."""
    table = Table(title="Segments")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Text")
    table.add_column("Style")

    for index, segment in enumerate(component.flatten()):
        table.add_row(
            str(index),
            Text(repr(segment.text), style=to_rich_style(segment.style)),
            Text(describe_style(segment.style)),
        )

    console.print(table)


def print_message(text: str) -> None:
    """Print a normal message."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(Text(text, style="red"), soft_wrap=True)
