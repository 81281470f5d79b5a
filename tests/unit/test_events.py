"""
TEST DOC: Click and Hover Events

WHAT: Tests for event factories, variants and capability gating.
WHY: show_item / show_entity are gated behind a flag; the gate must hold at
     construction time, not just in the codec.
HOW: Use the factory methods; toggle the flag with the `experimental` fixture.

CASES:
- Click factories build the right variant and action
- Events are immutable
- show_text coerces strings
- Experimental hover events need the flag

EDGE CASES:
- change_page rejects non-int pages
- show_entity accepts a UUID string
"""

from uuid import UUID

import pytest
from pydantic import ValidationError

from typewheel.errors import UnsupportedVariant
from typewheel.models.component import Component
from typewheel.models.event import (
    CLICK_ACTIONS,
    HOVER_ACTIONS,
    ChangePage,
    ClickEvent,
    HoverEvent,
    OpenUrl,
    ShowEntity,
    ShowItem,
    ShowText,
)
from typewheel.models.key import Key

ENTITY_UUID = "0f7ad2d1-2e5b-4a2f-9e5c-3f1b3a6c8d90"


class TestClickEvent:
    """Tests for click events."""

    @pytest.mark.parametrize(
        "factory,value,action",
        [
            (ClickEvent.open_url, "https://example.org", "open_url"),
            (ClickEvent.run_command, "/say hi", "run_command"),
            (ClickEvent.suggest_command, "/msg ", "suggest_command"),
            (ClickEvent.change_page, 2, "change_page"),
            (ClickEvent.copy_to_clipboard, "copied", "copy_to_clipboard"),
        ],
    )
    def test_factories(self, factory, value, action):
        """Each factory sets the action and the value."""
        event = factory(value)
        assert event.action == action
        assert event.value == value
        assert CLICK_ACTIONS[action] is type(event)

    def test_open_url_variant(self):
        """open_url builds an OpenUrl."""
        assert isinstance(ClickEvent.open_url("https://x"), OpenUrl)

    def test_change_page_is_strict(self):
        """Pages must be real ints."""
        with pytest.raises(ValidationError):
            ChangePage(value="3")

    def test_events_are_frozen(self):
        """Events cannot be modified after construction."""
        event = ClickEvent.run_command("/help")
        with pytest.raises(ValidationError):
            event.value = "/other"

    def test_equality_by_value(self):
        """Two events with the same payload are equal."""
        assert ClickEvent.run_command("/a") == ClickEvent.run_command("/a")
        assert ClickEvent.run_command("/a") != ClickEvent.suggest_command("/a")


class TestShowText:
    """Tests for the show_text hover event."""

    def test_coerces_string(self):
        """A string becomes a text component."""
        event = HoverEvent.show_text("tip")
        assert isinstance(event, ShowText)
        assert event.contents == Component.text("tip")

    def test_accepts_component(self):
        """A component is used as given."""
        tip = Component.text("tip").with_italic(True)
        assert HoverEvent.show_text(tip).contents == tip

    def test_not_experimental(self):
        """show_text works without the capability flag."""
        assert HoverEvent.show_text("ok").experimental is False


class TestExperimentalHoverEvents:
    """Tests for show_item and show_entity gating."""

    def test_show_item_requires_flag(self):
        """Constructing show_item with the flag off raises UnsupportedVariant."""
        with pytest.raises(UnsupportedVariant):
            HoverEvent.show_item("diamond")

    def test_show_entity_requires_flag(self):
        """Constructing show_entity with the flag off raises UnsupportedVariant."""
        with pytest.raises(UnsupportedVariant):
            HoverEvent.show_entity("pig", ENTITY_UUID)

    def test_show_item_with_flag(self, experimental):
        """With the flag on, show_item parses its key."""
        event = HoverEvent.show_item("minecraft:diamond", count=3)
        assert isinstance(event, ShowItem)
        assert event.id == Key.parse("diamond")
        assert event.count == 3
        assert event.tag is None

    def test_show_entity_with_flag(self, experimental):
        """With the flag on, show_entity accepts a UUID string and a name."""
        event = HoverEvent.show_entity("pig", ENTITY_UUID, name="Babe")
        assert isinstance(event, ShowEntity)
        assert event.type == Key.parse("pig")
        assert event.uuid == UUID(ENTITY_UUID)
        assert event.name == Component.text("Babe")

    def test_registry(self):
        """Every hover action is registered, with the right gate."""
        assert set(HOVER_ACTIONS) == {"show_text", "show_item", "show_entity"}
        assert HOVER_ACTIONS["show_item"].experimental is True
        assert HOVER_ACTIONS["show_entity"].experimental is True
