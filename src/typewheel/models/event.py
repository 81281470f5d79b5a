"""
event.py

PURPOSE: Click and hover event payloads attached to a component's style.
DEPENDENCIES: pydantic, config, key

ARCHITECTURE NOTES:
Each event family is a closed set of variants. A variant is a frozen pydantic
model whose `action` class attribute is the wire discriminator. The codec
looks variants up through CLICK_ACTIONS / HOVER_ACTIONS.

show_item and show_entity are experimental: their upstream schema is not
final, so they can only be constructed while the experimental_hover_events
capability flag is on. The same flag is checked again at the codec boundary.
"""

from typing import TYPE_CHECKING, Any, ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from typewheel.config import get_settings
from typewheel.models.key import Key

if TYPE_CHECKING:
    from typewheel.models.component import Component


class ClickEvent(BaseModel):
    """
    Base class for click actions.

    Use the factory methods rather than the variant classes directly:
        ClickEvent.run_command("/help")
        ClickEvent.change_page(3)
    """

    model_config = ConfigDict(frozen=True)

    action: ClassVar[str]

    @staticmethod
    def open_url(url: str) -> "OpenUrl":
        return OpenUrl(value=url)

    @staticmethod
    def run_command(command: str) -> "RunCommand":
        return RunCommand(value=command)

    @staticmethod
    def suggest_command(command: str) -> "SuggestCommand":
        return SuggestCommand(value=command)

    @staticmethod
    def change_page(page: int) -> "ChangePage":
        return ChangePage(value=page)

    @staticmethod
    def copy_to_clipboard(text: str) -> "CopyToClipboard":
        return CopyToClipboard(value=text)


class OpenUrl(ClickEvent):
    """Open a URL in the player's browser."""

    action: ClassVar[str] = "open_url"
    value: str


class RunCommand(ClickEvent):
    """Run a command (or send a chat message) as the clicking player."""

    action: ClassVar[str] = "run_command"
    value: str


class SuggestCommand(ClickEvent):
    """Put text into the player's chat input."""

    action: ClassVar[str] = "suggest_command"
    value: str


class ChangePage(ClickEvent):
    """Turn to a page of the open book."""

    action: ClassVar[str] = "change_page"
    value: StrictInt


class CopyToClipboard(ClickEvent):
    action: ClassVar[str] = "copy_to_clipboard"
    value: str


CLICK_ACTIONS: dict[str, type[ClickEvent]] = {
    cls.action: cls for cls in (OpenUrl, RunCommand, SuggestCommand, ChangePage, CopyToClipboard)
}


class HoverEvent(BaseModel):
    """
    Base class for hover tooltips.

    Factory methods accept plain strings where a component or key is expected:
        HoverEvent.show_text("hidden message")
        HoverEvent.show_item("minecraft:diamond", count=3)
    """

    model_config = ConfigDict(frozen=True)

    action: ClassVar[str]
    experimental: ClassVar[bool] = False

    @staticmethod
    def show_text(text: "str | Component") -> "ShowText":
        from typewheel.models.component import Component

        return ShowText(contents=Component.coerce(text))

    @staticmethod
    def show_item(item: str | Key, count: int = 1, tag: str | None = None) -> "ShowItem":
        item_id = Key.parse(item) if isinstance(item, str) else item
        return ShowItem(id=item_id, count=count, tag=tag)

    @staticmethod
    def show_entity(
        entity_type: str | Key,
        uuid: str | UUID,
        name: "str | Component | None" = None,
    ) -> "ShowEntity":
        from typewheel.models.component import Component

        return ShowEntity(
            type=Key.parse(entity_type) if isinstance(entity_type, str) else entity_type,
            uuid=UUID(uuid) if isinstance(uuid, str) else uuid,
            name=Component.coerce(name) if name is not None else None,
        )


class ShowText(HoverEvent):
    """Show a component as a tooltip."""

    action: ClassVar[str] = "show_text"
    contents: "Component"


class _ExperimentalHoverEvent(HoverEvent):
    """Hover variants that exist only while the capability flag is on."""

    experimental: ClassVar[bool] = True

    def __init__(self, **data: Any) -> None:
        get_settings().require_experimental_hover_events(self.action)
        super().__init__(**data)


class ShowItem(_ExperimentalHoverEvent):
    """
    Show an item tooltip.

    Attributes:
        id: Item identifier
        count: Stack size
        tag: Opaque NBT-like blob, passed through untouched
    """

    action: ClassVar[str] = "show_item"
    id: Key
    count: StrictInt = Field(default=1)
    tag: str | None = None


class ShowEntity(_ExperimentalHoverEvent):
    """
    Show an entity tooltip.

    Attributes:
        type: Entity type identifier
        uuid: The entity's UUID
        name: Optional display name
    """

    action: ClassVar[str] = "show_entity"
    type: Key
    uuid: UUID
    name: "Component | None" = None


HOVER_ACTIONS: dict[str, type[HoverEvent]] = {
    cls.action: cls for cls in (ShowText, ShowItem, ShowEntity)
}
