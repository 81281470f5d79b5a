"""
conftest.py

Shared pytest fixtures for typewheel tests.
"""

import json
from pathlib import Path

import pytest

from typewheel.codec.json import JsonCodec
from typewheel.config import Settings
from typewheel.models.color import NamedColor
from typewheel.models.component import Component


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure no TYPEWHEEL_* variable from the outer shell leaks into a test."""
    for name in ("TYPEWHEEL_JSON_CODEC", "TYPEWHEEL_EXPERIMENTAL_HOVER_EVENTS", "TYPEWHEEL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def experimental(monkeypatch: pytest.MonkeyPatch) -> None:
    """Switch on experimental hover events for the duration of a test."""
    monkeypatch.setenv("TYPEWHEEL_EXPERIMENTAL_HOVER_EVENTS", "true")


@pytest.fixture
def json_codec() -> JsonCodec:
    """A JSON codec with default capability flags."""
    return JsonCodec(Settings())


@pytest.fixture
def experimental_codec() -> JsonCodec:
    """A JSON codec that accepts experimental hover events."""
    return JsonCodec(Settings(experimental_hover_events=True))


@pytest.fixture
def deeply_nested() -> Component:
    """
    A three-level tree whose text spells out its pre-order:

        a
        ├── b
        │   ├── c
        │   └── d
        └── e
            ├── f
            └── g
    """
    return Component.text("a").append(
        [
            Component.text("b").append(["c", "d"]),
            Component.text("e").append(["f", "g"]),
        ]
    )


@pytest.fixture
def styled_hello() -> Component:
    """'hello ' in bold green followed by a blue 'world' child that inherits bold."""
    return (
        Component.text("hello ")
        .with_color(NamedColor.GREEN)
        .with_bold(True)
        .push_extra(Component.text("world").with_color(NamedColor.BLUE))
    )


@pytest.fixture
def component_file(tmp_path: Path) -> Path:
    """A JSON component file on disk."""
    path = tmp_path / "component.json"
    path.write_text(
        json.dumps(
            {
                "text": "hello ",
                "color": "gold",
                "extra": [{"text": "world", "bold": True}],
            }
        ),
        encoding="utf-8",
    )
    return path
