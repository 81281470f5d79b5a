"""
json.py

PURPOSE: Convert components to and from the game's JSON text format.
DEPENDENCIES: config, models, errors

ARCHITECTURE NOTES:
The wire format is flat: content keys, style keys and "extra" all live in
one JSON object. Unset style attributes and empty lists are omitted, so an
unstyled text component encodes as exactly {"text": "..."}.

Decoding is strict about types but lenient about shape:
- unknown keys are ignored (newer game versions add fields)
- a bare string is a text component
- an array is its first element with the rest appended as children
- an object with no content key is an empty component (style and children)

Nesting through "extra" and arrays is walked with an explicit stack, so long
chains of children do not hit the interpreter recursion limit.

Errors carry a JSONPath-like location such as "$.extra[2].hoverEvent.action".
Decoding builds a brand new tree, so a failure never leaves a half-built
component behind.

Example:
    {"text": "hello ", "color": "gray", "extra": [
        {"text": "world", "bold": true,
         "clickEvent": {"action": "open_url", "value": "https://example.org"}}
    ]}
"""

import json
import logging
import re
from typing import Any
from uuid import UUID

from typewheel.codec.base import ComponentCodec
from typewheel.config import Settings, get_settings
from typewheel.errors import (
    CodecError,
    InvalidValue,
    MalformedJson,
    MissingField,
    ParseError,
    TypeMismatch,
    UnknownVariant,
)
from typewheel.models.color import format_color, parse_color
from typewheel.models.component import (
    Component,
    Content,
    EmptyContent,
    KeybindContent,
    ScoreContent,
    SelectorContent,
    TextContent,
    TranslatableContent,
)
from typewheel.models.event import (
    CLICK_ACTIONS,
    ChangePage,
    ClickEvent,
    HOVER_ACTIONS,
    HoverEvent,
    ShowEntity,
    ShowItem,
    ShowText,
)
from typewheel.models.key import Key
from typewheel.models.style import FORMAT_FLAGS, Style

logger = logging.getLogger(__name__)

JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

# Content keys, in the order the game checks them
CONTENT_KEYS: tuple[str, ...] = ("text", "translate", "score", "selector", "keybind")

KNOWN_KEYS: frozenset[str] = frozenset(
    {
        *CONTENT_KEYS,
        *FORMAT_FLAGS,
        "with",
        "fallback",
        "separator",
        "color",
        "font",
        "insertion",
        "clickEvent",
        "hoverEvent",
        "extra",
    }
)

# A page number sent as a string, ASCII digits only
_PAGE_NUMBER = re.compile(r"\s*-?\d+\s*", re.ASCII)

_JSON_TYPE_NAMES: dict[type, str] = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


def _json_type(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _is_json_type(value: Any, expected: type) -> bool:
    # bool is a subclass of int; JSON keeps them apart
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def _field(
    obj: dict[str, Any],
    key: str,
    expected: type,
    path: str,
    required: bool = False,
) -> Any:
    """
    Read one key from a JSON object, checking its type.

    A JSON null is treated the same as an absent key.

    Raises:
        MissingField: If required and absent
        TypeMismatch: If present with the wrong JSON type
    """
    value = obj.get(key)
    if value is None:
        if required:
            raise MissingField(f"missing required field '{key}'", path)
        return None
    if not _is_json_type(value, expected):
        raise TypeMismatch(
            f"expected {_JSON_TYPE_NAMES[expected]}, got {_json_type(value)}",
            f"{path}.{key}",
        )
    return value


class JsonCodec(ComponentCodec[dict[str, Any]]):
    """
    Lossless codec for the JSON text component format.

    Usage:
        codec = JsonCodec()
        data = codec.encode(Component.text("hi").with_bold(True))
        # {"text": "hi", "bold": True}
        component = codec.decode(data)
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize the codec.

        Args:
            settings: Capability flags; read from the environment if omitted

        Raises:
            FeatureDisabled: If the JSON codec capability is switched off
        """
        self._settings = settings or get_settings()
        self._settings.require_json_codec()

    @property
    def settings(self) -> Settings:
        return self._settings

    # ------------------------------------------------------------------
    # Text helpers
    # ------------------------------------------------------------------

    def dumps(self, component: Component, indent: int | None = None) -> str:
        """Encode a component straight to JSON text."""
        separators = (",", ":") if indent is None else None
        return json.dumps(
            self.encode(component),
            ensure_ascii=False,
            indent=indent,
            separators=separators,
        )

    def loads(self, text: str | bytes) -> Component:
        """
        Decode a component from JSON text.

        Raises:
            MalformedJson: If the text is not JSON at all
            DecodeError: If the JSON does not describe a component
        """
        try:
            value = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedJson(f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
        return self.decode(value)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode(self, component: Component) -> dict[str, Any]:
        """
        Encode a component tree as a JSON object.

        Raises:
            UnsupportedVariant: If the tree holds an experimental hover event
                and the capability flag is off
        """
        return self._encode_component(component, "$")

    def _encode_component(self, component: Component, path: str) -> dict[str, Any]:
        root = self._encode_node(component, path)
        stack: list[tuple[Component, dict[str, Any], str]] = [(component, root, path)]

        while stack:
            node, obj, node_path = stack.pop()
            if not node.extra:
                continue
            children: list[dict[str, Any]] = []
            obj["extra"] = children
            for i, child in enumerate(node.extra):
                child_path = f"{node_path}.extra[{i}]"
                child_obj = self._encode_node(child, child_path)
                children.append(child_obj)
                stack.append((child, child_obj, child_path))

        return root

    def _encode_node(self, component: Component, path: str) -> dict[str, Any]:
        """Content and style of one node, without its children."""
        obj: dict[str, Any] = {}
        self._encode_content(component.content, obj, path)
        self._encode_style(component.style, obj, path)
        return obj

    def _encode_content(self, content: Content, obj: dict[str, Any], path: str) -> None:
        match content:
            case TextContent():
                obj["text"] = content.text
            case TranslatableContent():
                obj["translate"] = content.key
                if content.with_:
                    obj["with"] = [
                        self._encode_component(arg, f"{path}.with[{i}]")
                        for i, arg in enumerate(content.with_)
                    ]
                if content.fallback is not None:
                    obj["fallback"] = content.fallback
            case ScoreContent():
                score = {"name": content.name, "objective": content.objective}
                if content.value is not None:
                    score["value"] = content.value
                obj["score"] = score
            case SelectorContent():
                obj["selector"] = content.pattern
                if content.separator is not None:
                    obj["separator"] = self._encode_component(
                        content.separator, f"{path}.separator"
                    )
            case KeybindContent():
                obj["keybind"] = content.key
            case EmptyContent():
                pass
            case _:
                raise CodecError(f"{path}: cannot encode content type {type(content).__name__}")

    def _encode_style(self, style: Style, obj: dict[str, Any], path: str) -> None:
        if style.color is not None:
            obj["color"] = format_color(style.color)
        for flag in FORMAT_FLAGS:
            value = getattr(style, flag)
            if value is not None:
                obj[flag] = value
        if style.font is not None:
            obj["font"] = style.font
        if style.insertion is not None:
            obj["insertion"] = style.insertion
        if style.click_event is not None:
            obj["clickEvent"] = self._encode_click_event(style.click_event)
        if style.hover_event is not None:
            obj["hoverEvent"] = self._encode_hover_event(style.hover_event, f"{path}.hoverEvent")

    def _encode_click_event(self, event: ClickEvent) -> dict[str, Any]:
        return {"action": event.action, "value": event.value}

    def _encode_hover_event(self, event: HoverEvent, path: str) -> dict[str, Any]:
        if event.experimental:
            self._settings.require_experimental_hover_events(event.action, path)

        match event:
            case ShowText():
                contents: Any = self._encode_component(event.contents, f"{path}.contents")
            case ShowItem():
                contents = {"id": str(event.id), "count": event.count}
                if event.tag is not None:
                    contents["tag"] = event.tag
            case ShowEntity():
                contents = {"type": str(event.type), "id": str(event.uuid)}
                if event.name is not None:
                    contents["name"] = self._encode_component(event.name, f"{path}.contents.name")
            case _:
                raise CodecError(f"{path}: cannot encode hover event {type(event).__name__}")

        return {"action": event.action, "contents": contents}

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def decode(self, value: JsonValue) -> Component:
        """
        Decode a JSON value (object, string or array) into a component tree.

        Raises:
            TypeMismatch: A value has the wrong JSON type
            MissingField: A required key is absent
            UnknownVariant: An event action is not recognized
            UnsupportedVariant: An experimental hover event while the flag is off
            InvalidValue: A string cannot be interpreted (color, uuid)
        """
        return self._decode_component(value, "$")

    def _decode_component(self, value: Any, path: str) -> Component:
        root, pending = self._decode_node(value, path)
        stack: list[tuple[Component, list[tuple[Any, str]]]] = [(root, pending)]

        while stack:
            parent, pending = stack.pop()
            for child_value, child_path in pending:
                child, child_pending = self._decode_node(child_value, child_path)
                parent.extra.append(child)
                if child_pending:
                    stack.append((child, child_pending))

        return root

    def _decode_node(self, value: Any, path: str) -> tuple[Component, list[tuple[Any, str]]]:
        """
        Decode one node without its children.

        Returns:
            The childless component and its (child value, child path) pairs
            in the order they are appended
        """
        # An array is its head followed by the rest; heads may nest
        tails: list[list[tuple[Any, str]]] = []
        while isinstance(value, list):
            if not value:
                raise InvalidValue("a component array must not be empty", path)
            tails.append([(item, f"{path}[{i}]") for i, item in enumerate(value[1:], start=1)])
            value, path = value[0], f"{path}[0]"

        if isinstance(value, str):
            component = Component.text(value)
            pending: list[tuple[Any, str]] = []
        elif isinstance(value, dict):
            unknown = value.keys() - KNOWN_KEYS
            if unknown:
                logger.debug(f"Ignoring unknown fields at {path}: {sorted(unknown)}")

            component = Component(
                content=self._decode_content(value, path),
                style=self._decode_style(value, path),
            )
            extra_values = _field(value, "extra", list, path) or []
            pending = [(child, f"{path}.extra[{i}]") for i, child in enumerate(extra_values)]
        else:
            raise TypeMismatch(
                f"expected a component (string, array or object), got {_json_type(value)}",
                path,
            )

        # Innermost array tails follow the head's own children
        for tail in reversed(tails):
            pending.extend(tail)
        return component, pending

    def _decode_content(self, obj: dict[str, Any], path: str) -> Content:
        if obj.get("text") is not None:
            return TextContent(text=_field(obj, "text", str, path))

        if obj.get("translate") is not None:
            args = _field(obj, "with", list, path) or []
            return TranslatableContent(
                key=_field(obj, "translate", str, path),
                with_=[
                    self._decode_component(arg, f"{path}.with[{i}]")
                    for i, arg in enumerate(args)
                ],
                fallback=_field(obj, "fallback", str, path),
            )

        if obj.get("score") is not None:
            score = _field(obj, "score", dict, path)
            score_path = f"{path}.score"
            return ScoreContent(
                name=_field(score, "name", str, score_path, required=True),
                objective=_field(score, "objective", str, score_path, required=True),
                value=_field(score, "value", str, score_path),
            )

        if obj.get("selector") is not None:
            separator = obj.get("separator")
            return SelectorContent(
                pattern=_field(obj, "selector", str, path),
                separator=(
                    self._decode_component(separator, f"{path}.separator")
                    if separator is not None
                    else None
                ),
            )

        if obj.get("keybind") is not None:
            return KeybindContent(key=_field(obj, "keybind", str, path))

        return EmptyContent()

    def _decode_style(self, obj: dict[str, Any], path: str) -> Style:
        values: dict[str, Any] = {}

        color = _field(obj, "color", str, path)
        if color is not None:
            try:
                values["color"] = parse_color(color)
            except ParseError as e:
                raise InvalidValue(str(e), f"{path}.color") from e

        for flag in FORMAT_FLAGS:
            values[flag] = _field(obj, flag, bool, path)

        values["font"] = _field(obj, "font", str, path)
        values["insertion"] = _field(obj, "insertion", str, path)

        click = _field(obj, "clickEvent", dict, path)
        if click is not None:
            values["click_event"] = self._decode_click_event(click, f"{path}.clickEvent")

        hover = _field(obj, "hoverEvent", dict, path)
        if hover is not None:
            values["hover_event"] = self._decode_hover_event(hover, f"{path}.hoverEvent")

        return Style(**values)

    def _decode_click_event(self, obj: dict[str, Any], path: str) -> ClickEvent:
        action = _field(obj, "action", str, path, required=True)
        event_cls = CLICK_ACTIONS.get(action)
        if event_cls is None:
            raise UnknownVariant(f"unknown click action '{action}'", f"{path}.action")

        if event_cls is ChangePage:
            raw = obj.get("value")
            # Older servers send the page number as a string
            if isinstance(raw, str) and _PAGE_NUMBER.fullmatch(raw):
                raw = int(raw)
            if raw is None:
                raise MissingField("missing required field 'value'", path)
            if not _is_json_type(raw, int):
                raise TypeMismatch(f"expected number, got {_json_type(raw)}", f"{path}.value")
            return ChangePage(value=raw)

        return event_cls(value=_field(obj, "value", str, path, required=True))

    def _decode_hover_event(self, obj: dict[str, Any], path: str) -> HoverEvent:
        action = _field(obj, "action", str, path, required=True)
        event_cls = HOVER_ACTIONS.get(action)
        if event_cls is None:
            raise UnknownVariant(f"unknown hover action '{action}'", f"{path}.action")

        if event_cls.experimental:
            self._settings.require_experimental_hover_events(action, path)

        # "value" is the pre-1.16 spelling of "contents"
        key = "contents" if obj.get("contents") is not None else "value"
        contents = obj.get(key)
        contents_path = f"{path}.{key}"
        if contents is None:
            raise MissingField("missing required field 'contents'", path)

        if event_cls is ShowText:
            return ShowText(contents=self._decode_component(contents, contents_path))

        if not isinstance(contents, dict):
            raise TypeMismatch(f"expected object, got {_json_type(contents)}", contents_path)

        # Every field is type-checked above, and the flag was checked against
        # this codec's settings rather than the environment, so skip __init__
        if event_cls is ShowItem:
            count = _field(contents, "count", int, contents_path)
            return ShowItem.model_construct(
                id=Key.parse(_field(contents, "id", str, contents_path, required=True)),
                count=1 if count is None else count,
                tag=_field(contents, "tag", str, contents_path),
            )

        name = contents.get("name")
        return ShowEntity.model_construct(
            type=Key.parse(_field(contents, "type", str, contents_path, required=True)),
            uuid=self._decode_uuid(contents, contents_path),
            name=(
                self._decode_component(name, f"{contents_path}.name")
                if name is not None
                else None
            ),
        )

    def _decode_uuid(self, contents: dict[str, Any], path: str) -> UUID:
        raw = _field(contents, "id", str, path, required=True)
        try:
            return UUID(raw)
        except ValueError as e:
            raise InvalidValue(f"'{raw}' is not a valid UUID", f"{path}.id") from e


def encode(component: Component, settings: Settings | None = None) -> dict[str, Any]:
    """Encode a component with a codec built from the given (or current) settings."""
    return JsonCodec(settings).encode(component)


def decode(value: JsonValue, settings: Settings | None = None) -> Component:
    """Decode a component with a codec built from the given (or current) settings."""
    return JsonCodec(settings).decode(value)
