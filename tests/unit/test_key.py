"""
TEST DOC: Keys

WHAT: Tests for namespaced Key parsing and formatting.
WHY: Item and entity ids in hover events are keys; "stone" and
     "minecraft:stone" must be the same key.

CASES:
- Parse with and without a namespace
- Default namespace normalization
- String and compact forms

EDGE CASES:
- More than one ':' (value keeps the rest)
"""

from typewheel.models.key import Key


class TestKey:
    """Tests for Key."""

    def test_parse_without_namespace(self):
        """No separator means the default namespace."""
        key = Key.parse("stone")
        assert key.namespace is None
        assert key.value == "stone"

    def test_parse_with_namespace(self):
        """A custom namespace is kept."""
        key = Key.parse("bukkit:help")
        assert key.namespace == "bukkit"
        assert key.value == "help"

    def test_default_namespace_normalized(self):
        """'minecraft:stone' equals 'stone'."""
        assert Key.parse("minecraft:stone") == Key.parse("stone")
        assert Key.parse("minecraft:stone") == Key.minecraft("stone")

    def test_str_includes_namespace(self):
        """The string form always spells out the namespace."""
        assert str(Key.parse("stone")) == "minecraft:stone"
        assert str(Key.parse("mod:gem")) == "mod:gem"

    def test_compact_elides_default(self):
        """compact() drops the default namespace."""
        assert Key.parse("minecraft:stone").compact() == "stone"
        assert Key.parse("mod:gem").compact() == "mod:gem"

    def test_resolved_namespace(self):
        """resolved_namespace fills in the default."""
        assert Key.parse("stone").resolved_namespace == "minecraft"

    def test_value_keeps_extra_separators(self):
        """Only the first ':' splits."""
        key = Key.parse("mod:a:b")
        assert key.namespace == "mod"
        assert key.value == "a:b"
