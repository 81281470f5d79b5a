"""
key.py

PURPOSE: Namespaced resource identifiers ("minecraft:stone").
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
Keys only check structural shape (one optional namespace, one value).
Whether a key names a real item or entity is not our concern.
The default namespace is stored as None so that "stone" and
"minecraft:stone" compare equal.
"""

from dataclasses import dataclass

MINECRAFT_NAMESPACE = "minecraft"


@dataclass(frozen=True)
class Key:
    """
    A namespaced key pointing at a game resource.

    Examples:
        - Key.parse("stone") -> Key(namespace=None, value="stone")
        - Key.parse("bukkit:help") -> Key(namespace="bukkit", value="help")
        - str(Key.minecraft("stone")) -> "minecraft:stone"
    """

    namespace: str | None
    value: str

    def __post_init__(self) -> None:
        # Normalize the default namespace so equality ignores how it was written
        if self.namespace == MINECRAFT_NAMESPACE:
            object.__setattr__(self, "namespace", None)

    @classmethod
    def minecraft(cls, value: str) -> "Key":
        return cls(None, value)

    @classmethod
    def parse(cls, text: str) -> "Key":
        """Split on the first ':'; no separator means the default namespace."""
        namespace, sep, value = text.partition(":")
        if not sep:
            return cls(None, text)
        return cls(namespace, value)

    @property
    def resolved_namespace(self) -> str:
        return self.namespace or MINECRAFT_NAMESPACE

    def compact(self) -> str:
        """The string form with the default namespace elided."""
        if self.namespace is None:
            return self.value
        return f"{self.namespace}:{self.value}"

    def __str__(self) -> str:
        return f"{self.resolved_namespace}:{self.value}"
