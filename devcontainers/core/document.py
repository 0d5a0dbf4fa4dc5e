"""Generic document trees: parsing, serialising and node inspection.

A document tree is built from ``dict`` (or :class:`ObjectPairs`), ``list``,
``str``, ``int``, ``float``, ``bool`` and ``None``. Text parsed by
:func:`loads` keeps objects as :class:`ObjectPairs` so repeated keys are
still visible to the decoder.
"""

import json
from typing import Any, Iterator, Mapping, Tuple

from .constants import DEFAULT_INDENT
from .exceptions import DocumentSyntaxError


class ObjectPairs(list):
    """A JSON object as written, keeping every (key, value) pair in order."""


def loads(text: str) -> Any:
    """Parse JSON text into a document tree."""
    try:
        return json.loads(text, object_pairs_hook=ObjectPairs)
    except json.JSONDecodeError as e:
        raise DocumentSyntaxError(e.msg, e.lineno, e.colno) from e


def dumps(document: Any, indent: int = DEFAULT_INDENT) -> str:
    """Serialise a document tree as JSON text."""
    return json.dumps(document, indent=indent, ensure_ascii=False)


def is_object(node: Any) -> bool:
    return isinstance(node, (Mapping, ObjectPairs))


def is_array(node: Any) -> bool:
    return isinstance(node, list) and not isinstance(node, ObjectPairs)


def has_key(node: Any, key: str) -> bool:
    """Check whether an object node contains a key."""
    if isinstance(node, ObjectPairs):
        return any(name == key for name, _ in node)
    return key in node


def iter_members(node: Any) -> Iterator[Tuple[str, Any]]:
    """Iterate over the (key, value) pairs of an object node."""
    if isinstance(node, ObjectPairs):
        return iter(node)
    return iter(node.items())


def kind_of(node: Any) -> str:
    """Name the document type of a node, as used in error messages."""
    if node is None:
        return "null"
    if isinstance(node, bool):
        return "boolean"
    if isinstance(node, int):
        return "integer"
    if isinstance(node, float):
        return "number"
    if isinstance(node, str):
        return "string"
    if is_array(node):
        return "array"
    if is_object(node):
        return "object"
    return type(node).__name__


def join_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"
