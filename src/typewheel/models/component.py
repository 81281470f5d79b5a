"""
component.py

PURPOSE: The component tree: content, style and ordered children.
DEPENDENCIES: pydantic, style, event, color

ARCHITECTURE NOTES:
A Component owns its Style and its `extra` children; there are no parent
references, so the tree can never contain a cycle. Effective (inherited)
styles are computed on the fly by flatten(), which folds Style.merge from the
root down to each node.

Two method forms exist for every style attribute, both routed through
_apply_style():
- setters mutate in place and return self, for chaining:
      component.bold(True).color(NamedColor.RED)
- builders return a modified copy and leave the receiver untouched:
      Component.text("hi").with_bold(True).with_color("red")

Content variants:
    EmptyContent          {}  (style and children only)
    TextContent           {"text": ...}
    TranslatableContent   {"translate": ..., "with": [...]}
    ScoreContent          {"score": {"name": ..., "objective": ...}}
    SelectorContent       {"selector": ..., "separator": ...}
    KeybindContent        {"keybind": ...}
"""

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from enum import Enum, auto
from typing import Any, NamedTuple

from pydantic import BaseModel, Field

from typewheel.models.color import HexColor, parse_color
from typewheel.models.event import HoverEvent, ShowEntity, ShowText
from typewheel.models.style import Style


class Content(BaseModel):
    """Base class for what a component displays."""

    def fallback_text(self) -> str:
        """The literal text shown when the content is not resolved by a client."""
        raise NotImplementedError


class EmptyContent(Content):
    """No content of its own; the node only carries a style and children."""

    def fallback_text(self) -> str:
        return ""


class TextContent(Content):
    """Raw text."""

    text: str

    def fallback_text(self) -> str:
        return self.text


class TranslatableContent(Content):
    """
    A translation key plus the components interpolated into its %s slots.

    Attributes:
        key: Translation key (e.g. "chat.type.text")
        with_: Arguments, in slot order
        fallback: Text shown by clients that do not know the key
    """

    key: str
    with_: list["Component"] = Field(default_factory=list)
    fallback: str | None = None

    def fallback_text(self) -> str:
        return self.fallback if self.fallback is not None else self.key


class ScoreContent(Content):
    """
    A scoreboard score.

    Attributes:
        name: Score holder (player name, UUID or selector)
        objective: Scoreboard objective name
        value: Resolved score, when a server has filled it in
    """

    name: str
    objective: str
    value: str | None = None

    def fallback_text(self) -> str:
        return self.value if self.value is not None else ""


class SelectorContent(Content):
    """An entity selector, resolved to entity names by a server."""

    pattern: str
    separator: "Component | None" = None

    def fallback_text(self) -> str:
        return self.pattern


class KeybindContent(Content):
    """A keybind identifier (e.g. "key.jump"), rendered as the bound key."""

    key: str

    def fallback_text(self) -> str:
        return self.key


class Segment(NamedTuple):
    """One flattened piece of text with its fully inherited style."""

    text: str
    style: Style


class IterOrder(Enum):
    """Traversal order for Component.iter()."""

    DEPTH_FIRST = auto()
    BREADTH_FIRST = auto()


class VisitKind(Enum):
    PUSH = auto()  # Node entered; its children follow
    POP = auto()  # Node and all of its children done


class Visit(NamedTuple):
    kind: VisitKind
    node: "Component"


def _coerce_style_value(name: str, value: Any) -> Any:
    """Accept the convenient shorthands for color and hover text."""
    if value is None:
        return None
    if name == "color":
        if isinstance(value, str):
            return parse_color(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return HexColor(value)
    if name == "hover_event" and isinstance(value, (str, Component)):
        return HoverEvent.show_text(value)
    return value


def _style_setter(name: str) -> Callable[..., "Component"]:
    def setter(self: "Component", value: Any) -> "Component":
        return self._apply_style(name, value)

    setter.__name__ = name
    setter.__doc__ = f"Set the `{name}` style attribute in place and return this component."
    return setter


def _style_builder(name: str) -> Callable[..., "Component"]:
    def builder(self: "Component", value: Any) -> "Component":
        return self.model_copy(deep=True)._apply_style(name, value)

    builder.__name__ = f"with_{name}"
    builder.__doc__ = f"Return a copy of this component with the `{name}` style attribute set."
    return builder


def _style_clearer(name: str) -> Callable[..., None]:
    def clearer(self: "Component") -> None:
        self._apply_style(name, None)

    clearer.__name__ = f"clear_{name}"
    clearer.__doc__ = f"Unset the `{name}` style attribute."
    return clearer


class Component(BaseModel):
    """
    A node of the text tree.

    Attributes:
        content: What this node displays
        style: This node's own (not inherited) style
        extra: Children, rendered after this node in list order
    """

    content: Content
    style: Style = Field(default_factory=Style)
    extra: list["Component"] = Field(default_factory=list)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "Component":
        """A component with no content, used to group styled children."""
        return cls(content=EmptyContent())

    @classmethod
    def text(cls, text: str) -> "Component":
        """A text component with no style and no children."""
        return cls(content=TextContent(text=text))

    @classmethod
    def translatable(
        cls,
        key: str,
        with_: Iterable["str | Component"] = (),
        fallback: str | None = None,
    ) -> "Component":
        """A translation component. Arguments may be strings or components."""
        return cls(
            content=TranslatableContent(
                key=key,
                with_=[cls.coerce(arg) for arg in with_],
                fallback=fallback,
            )
        )

    @classmethod
    def score(cls, name: str, objective: str, value: str | None = None) -> "Component":
        return cls(content=ScoreContent(name=name, objective=objective, value=value))

    @classmethod
    def selector(
        cls,
        pattern: str,
        separator: "str | Component | None" = None,
    ) -> "Component":
        return cls(
            content=SelectorContent(
                pattern=pattern,
                separator=cls.coerce(separator) if separator is not None else None,
            )
        )

    @classmethod
    def keybind(cls, key: str) -> "Component":
        return cls(content=KeybindContent(key=key))

    @classmethod
    def coerce(cls, value: "str | Component") -> "Component":
        """Turn a bare string into a text component; pass components through."""
        if isinstance(value, Component):
            return value
        if isinstance(value, str):
            return cls.text(value)
        raise TypeError(f"Expected str or Component, got {type(value).__name__}")

    # ------------------------------------------------------------------
    # Style setters / builders / clearers
    # ------------------------------------------------------------------

    def _apply_style(self, name: str, value: Any) -> "Component":
        """Single update path shared by setters, builders and clearers."""
        setattr(self.style, name, _coerce_style_value(name, value))
        return self

    color = _style_setter("color")
    bold = _style_setter("bold")
    italic = _style_setter("italic")
    underlined = _style_setter("underlined")
    strikethrough = _style_setter("strikethrough")
    obfuscated = _style_setter("obfuscated")
    font = _style_setter("font")
    insertion = _style_setter("insertion")
    click_event = _style_setter("click_event")
    hover_event = _style_setter("hover_event")

    with_color = _style_builder("color")
    with_bold = _style_builder("bold")
    with_italic = _style_builder("italic")
    with_underlined = _style_builder("underlined")
    with_strikethrough = _style_builder("strikethrough")
    with_obfuscated = _style_builder("obfuscated")
    with_font = _style_builder("font")
    with_insertion = _style_builder("insertion")
    with_click_event = _style_builder("click_event")
    with_hover_event = _style_builder("hover_event")

    clear_color = _style_clearer("color")
    clear_bold = _style_clearer("bold")
    clear_italic = _style_clearer("italic")
    clear_underlined = _style_clearer("underlined")
    clear_strikethrough = _style_clearer("strikethrough")
    clear_obfuscated = _style_clearer("obfuscated")
    clear_font = _style_clearer("font")
    clear_insertion = _style_clearer("insertion")
    clear_click_event = _style_clearer("click_event")
    clear_hover_event = _style_clearer("hover_event")

    def with_style(self, style: Style) -> "Component":
        """Return a copy of this component with its whole style replaced."""
        copied = self.model_copy(deep=True)
        copied.style = style.model_copy(deep=True)
        return copied

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def push_extra(self, child: "str | Component") -> "Component":
        """Append one child. The child is owned by this component afterwards."""
        self.extra.append(self.coerce(child))
        return self

    def append(self, children: Iterable["str | Component"]) -> "Component":
        """Append several children, preserving their order."""
        self.extra.extend(self.coerce(child) for child in children)
        return self

    def with_extra(self, children: Iterable["str | Component"]) -> "Component":
        """Return a copy of this component with the children appended."""
        return self.model_copy(deep=True).append(children)

    def clear_extra(self) -> None:
        self.extra.clear()

    def take_extra(self) -> list["Component"]:
        """Remove and return all children."""
        children, self.extra = self.extra, []
        return children

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def shallow_text(self) -> str | None:
        """The text of this node alone, or None if it is not a text node."""
        if isinstance(self.content, TextContent):
            return self.content.text
        return None

    def flatten(self) -> list[Segment]:
        """
        Resolve the tree into (text, effective style) segments.

        Nodes are visited in pre-order, children in list order. Each node
        contributes its fallback text (translations are not resolved against
        a locale) with its style merged down from every ancestor.

        Returns:
            One Segment per node, in document order
        """
        segments: list[Segment] = []
        stack: list[tuple[Component, Style]] = [(self, Style())]

        while stack:
            node, inherited = stack.pop()
            effective = node.style.merge(inherited)
            segments.append(Segment(node.content.fallback_text(), effective))
            # Reversed so the first child is popped next
            for child in reversed(node.extra):
                stack.append((child, effective))

        return segments

    def plain_text(self) -> str:
        """All flattened text concatenated, without any formatting."""
        return "".join(segment.text for segment in self.flatten())

    def iter(
        self,
        order: IterOrder = IterOrder.DEPTH_FIRST,
        include_arguments: bool = False,
    ) -> Iterator["Component"]:
        """
        Iterate over this node and all of its descendants.

        Args:
            order: Depth-first (document order) or breadth-first
            include_arguments: Also visit translation arguments, before the
                children of the translation node
        """
        queue: deque[Component] = deque([self])

        while queue:
            node = queue.popleft()
            children = list(node.extra)
            if include_arguments and isinstance(node.content, TranslatableContent):
                children = node.content.with_ + children

            if order is IterOrder.BREADTH_FIRST:
                queue.extend(children)
            else:
                queue.extendleft(reversed(children))

            yield node

    def visit(self) -> Iterator[Visit]:
        """
        Depth-first traversal that reports entering and leaving each node.

        A PUSH is emitted when a node is reached, then all of its subtree,
        then a matching POP. Useful for tracking nesting depth or a stack of
        styles.
        """
        queue: deque[Visit] = deque([Visit(VisitKind.PUSH, self)])

        while queue:
            op = queue.popleft()
            if op.kind is VisitKind.PUSH:
                queue.appendleft(Visit(VisitKind.POP, op.node))
                for child in reversed(op.node.extra):
                    queue.appendleft(Visit(VisitKind.PUSH, child))
            yield op


# Resolve the forward references to Component across the model modules
_namespace = {"Component": Component}
TranslatableContent.model_rebuild(_types_namespace=_namespace)
SelectorContent.model_rebuild(_types_namespace=_namespace)
ShowText.model_rebuild(_types_namespace=_namespace)
ShowEntity.model_rebuild(_types_namespace=_namespace)
Component.model_rebuild(_types_namespace=_namespace)
