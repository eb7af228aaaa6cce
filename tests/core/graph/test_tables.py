"""Tests for capability tables and tag sets."""

import pytest

from graphwalk.core.exceptions import KeyNotFoundError
from graphwalk.core.graph.tables import (
    AttributeTagSet,
    HashTable,
    MapTable,
    TableTagSet,
    mk_map,
    mk_table,
)


def test_hash_table_set_get():
    """Test basic table bindings."""
    table = HashTable()
    table.set("a", 1)
    table.set("a", 2)
    assert table.contains("a")
    assert "a" in table
    assert table.get("a") == 2
    assert len(table) == 1


def test_hash_table_missing_key():
    """Test that missing keys raise instead of returning a default."""
    table = HashTable()
    with pytest.raises(KeyNotFoundError):
        table.get("missing")


def test_hash_table_remove():
    """Test removing bindings."""
    table = HashTable()
    table.set(1, "x")
    table.remove(1)
    table.remove(2)
    assert not table.contains(1)
    assert len(table) == 0


def test_hash_table_custom_equality():
    """Test case-insensitive keys through custom eq and hash."""
    table = mk_table(eq=lambda a, b: a.lower() == b.lower(), hash=lambda s: hash(s.lower()))
    table.set("Key", 1)
    assert table.contains("KEY")
    assert table.get("key") == 1


def test_map_table_unhashable_keys():
    """Test that a MapTable accepts keys without a hash."""
    table = MapTable()
    table.set([2, 1], "b")
    table.set([1, 2], "a")
    assert table.contains([1, 2])
    assert table.get([2, 1]) == "b"
    assert len(table) == 2
    with pytest.raises(KeyNotFoundError):
        table.get([3])


def test_mk_map_with_comparator():
    """Test an ordered table with a custom comparison."""
    table = mk_map(cmp=lambda a, b: (len(a) > len(b)) - (len(a) < len(b)))
    table.set("ab", 1)
    assert table.contains("xy")
    assert not table.contains("abc")


def test_table_tag_set():
    """Test marks stored as table bindings."""
    table = HashTable()
    tags = TableTagSet(table)
    assert not tags.get_tag(1)
    tags.set_tag(1)
    assert tags.get_tag(1)
    assert table.get(1) is True


class Node:
    pass


def test_attribute_tag_set():
    """Test marks stored on the vertex objects."""
    node = Node()
    tags = AttributeTagSet()
    assert not tags.get_tag(node)
    tags.set_tag(node)
    assert tags.get_tag(node)


def test_attribute_tag_set_ignores_earlier_marks():
    """Test that a new tag set does not see marks of a previous one."""
    node = Node()
    AttributeTagSet().set_tag(node)
    assert not AttributeTagSet().get_tag(node)
