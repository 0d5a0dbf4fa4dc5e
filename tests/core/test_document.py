"""Tests for document parsing and inspection."""

import pytest

from devcontainers.core.document import (
    ObjectPairs,
    dumps,
    has_key,
    index_path,
    is_array,
    is_object,
    join_path,
    kind_of,
    loads,
)
from devcontainers.core.exceptions import DocumentSyntaxError


class TestDocument:
    """Test suite for document helpers."""

    def test_loads_keeps_duplicate_keys(self):
        """Test that parsed objects keep every pair."""
        document = loads('{"a": 1, "b": {"c": 2}, "a": 3}')

        assert isinstance(document, ObjectPairs)
        assert list(document) == [("a", 1), ("b", ObjectPairs([("c", 2)])), ("a", 3)]

    def test_loads_syntax_error(self):
        """Test that invalid JSON raises DocumentSyntaxError."""
        with pytest.raises(DocumentSyntaxError) as exc_info:
            loads('{"name": "x",\n  oops}')

        assert exc_info.value.lineno == 2
        assert "line 2" in str(exc_info.value)

    def test_dumps(self):
        """Test serialising a tree."""
        assert dumps({"name": "Ünïcode", "ports": [1]}, indent=None) == '{"name": "Ünïcode", "ports": [1]}'

    def test_object_and_array_detection(self):
        """Test that pair lists are objects, not arrays."""
        pairs = ObjectPairs([("a", 1)])

        assert is_object(pairs)
        assert not is_array(pairs)
        assert is_object({"a": 1})
        assert is_array([1])
        assert not is_object([1])

    def test_has_key(self):
        """Test key lookup on both object forms."""
        assert has_key(ObjectPairs([("port", 1)]), "port")
        assert not has_key(ObjectPairs([("label", "x")]), "port")
        assert has_key({"port": 1}, "port")

    @pytest.mark.parametrize("node, kind", [
        (None, "null"),
        (True, "boolean"),
        (3, "integer"),
        (2.5, "number"),
        ("x", "string"),
        ([], "array"),
        ({}, "object"),
        (ObjectPairs(), "object"),
    ])
    def test_kind_of(self, node, kind):
        """Test naming node kinds."""
        assert kind_of(node) == kind

    def test_paths(self):
        """Test building document paths."""
        assert join_path("", "build") == "build"
        assert join_path("build", "args") == "build.args"
        assert index_path("forwardPorts", 2) == "forwardPorts[2]"
