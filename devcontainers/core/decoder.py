"""Decoding of document trees into schema entities."""

import logging
import types
from enum import Enum
from typing import Any, Dict, List, Tuple, Type, Union, get_args, get_origin

from pydantic import BaseModel, ValidationError

from ..models.base import Entity, Variant
from .document import index_path, is_array, is_object, iter_members, join_path, kind_of
from .exceptions import (
    DuplicateKeyError,
    MissingFieldError,
    NoMatchingVariantError,
    TypeMismatchError,
    UnknownFieldError,
    describe_path,
)

logger = logging.getLogger(__name__)

_UNION_TYPES = (Union, types.UnionType)

_SCALAR_KINDS = {
    bool: "boolean",
    int: "integer",
    str: "string",
}


class Decoder:
    """Walks an entity's field declarations against a document tree.

    Decoding is depth-first and stops at the first error. Fields are checked
    in document order, so the error reported for a given document is always
    the same one. The walk settles document shapes: union choice, repeated
    keys and error paths. Built values then go through pydantic strict
    validation, which enforces field constraints such as port ranges.

    A JSON ``null`` is a type mismatch, never an absent field. Leave the key
    out to leave an optional field unset; ``encode`` does the same, so
    decoding an encoded entity gives back an equal entity.
    """

    def decode(self, model: Type[Entity], document: Any) -> Entity:
        """Decode a whole document into ``model``."""
        return self._decode_entity(model, document, "")

    def _decode_entity(self, model: Type[Entity], node: Any, path: str) -> Entity:
        members = self._members(node, path)
        fields = model.document_fields()
        values: Dict[str, Any] = {}
        captured: Dict[str, Any] = {}

        for key, raw in members:
            field_path = join_path(path, key)
            attr = fields.get(key)
            if attr is None:
                if model.capture_field is None:
                    raise UnknownFieldError(field_path)
                logger.debug(f"Keeping unrecognized field {field_path}")
                captured[key] = self._plain(raw, field_path)
                continue
            annotation = model.model_fields[attr].annotation
            values[attr] = self._decode_value(annotation, raw, field_path)

        for key, attr in fields.items():
            if attr not in values and model.model_fields[attr].is_required():
                raise MissingFieldError(join_path(path, key))

        if model.required_any:
            present = {key for key, _ in members}
            if not present.intersection(model.required_any):
                raise MissingFieldError(join_path(path, model.required_any[0]))

        if model.capture_field is not None:
            values[model.capture_field] = captured
        return self._validate(model, values, path)

    def _decode_value(self, annotation: Any, node: Any, path: str) -> Any:
        origin = get_origin(annotation)

        if origin in _UNION_TYPES:
            choices = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(choices) == 1:
                return self._decode_value(choices[0], node, path)
            return self._decode_union(choices, node, path)

        if origin is list:
            (item_type,) = get_args(annotation)
            if not is_array(node):
                raise TypeMismatchError(path, "array", kind_of(node))
            return [
                self._decode_value(item_type, item, index_path(path, index))
                for index, item in enumerate(node)
            ]

        if origin is dict:
            _, value_type = get_args(annotation)
            return {
                key: self._decode_value(value_type, value, join_path(path, key))
                for key, value in self._members(node, path)
            }

        if annotation is Any:
            return self._plain(node, path)

        if isinstance(annotation, type):
            if issubclass(annotation, Entity):
                return self._decode_entity(annotation, node, path)
            if issubclass(annotation, Variant):
                return self._decode_variant(annotation, node, path)
            if issubclass(annotation, Enum):
                return self._decode_enum(annotation, node, path)
            if annotation in _SCALAR_KINDS:
                return self._decode_scalar(annotation, node, path)

        raise TypeError(f"Unsupported field type {annotation!r} at {describe_path(path)}")

    def _decode_union(self, choices: List[Any], node: Any, path: str) -> Any:
        # First shape match commits; errors inside it are not retried elsewhere
        for choice in choices:
            if choice.matches(node):
                logger.debug(f"Decoding {describe_path(path)} as {choice.__name__}")
                return self._decode_value(choice, node, path)
        raise NoMatchingVariantError(path, kind_of(node))

    def _decode_variant(self, variant: Type[Variant], node: Any, path: str) -> Variant:
        if not variant.matches(node):
            raise NoMatchingVariantError(path, kind_of(node))
        field = variant.payload_field()
        payload = self._decode_value(variant.model_fields[field].annotation, node, path)
        return self._validate(variant, {field: payload}, path)

    def _decode_enum(self, enum: Type[Enum], node: Any, path: str) -> Enum:
        if not isinstance(node, str):
            raise TypeMismatchError(path, "string", kind_of(node))
        try:
            return enum(node)
        except ValueError:
            raise NoMatchingVariantError(path, f"string {node!r}") from None

    def _decode_scalar(self, scalar: type, node: Any, path: str) -> Any:
        if scalar is bool:
            valid = isinstance(node, bool)
        elif scalar is int:
            valid = isinstance(node, int) and not isinstance(node, bool)
        else:
            valid = isinstance(node, scalar)
        if not valid:
            raise TypeMismatchError(path, _SCALAR_KINDS[scalar], kind_of(node))
        return node

    def _plain(self, node: Any, path: str) -> Any:
        """Copy an opaque value into plain dicts and lists."""
        if is_object(node):
            return {
                key: self._plain(value, join_path(path, key))
                for key, value in self._members(node, path)
            }
        if is_array(node):
            return [self._plain(item, index_path(path, index)) for index, item in enumerate(node)]
        return node

    def _members(self, node: Any, path: str) -> List[Tuple[str, Any]]:
        """Get the members of an object node, rejecting repeated keys."""
        if not is_object(node):
            raise TypeMismatchError(path, "object", kind_of(node))
        members = []
        seen = set()
        for key, value in iter_members(node):
            if not isinstance(key, str):
                raise TypeMismatchError(path, "string keys", kind_of(key))
            if key in seen:
                raise DuplicateKeyError(join_path(path, key))
            seen.add(key)
            members.append((key, value))
        return members

    def _validate(self, model: Type[BaseModel], values: Dict[str, Any], path: str) -> Any:
        try:
            return model.model_validate(values, strict=True)
        except ValidationError as e:
            error = e.errors()[0]
            raise TypeMismatchError(
                self._error_path(model, path, error["loc"]),
                error["msg"].removeprefix("Input should be "),
                f"{kind_of(error['input'])} {error['input']!r}",
            ) from e

    def _error_path(self, model: Type[BaseModel], path: str, loc: Tuple[Any, ...]) -> str:
        """Turn a pydantic error location into a document path."""
        if issubclass(model, Variant):
            # A variant's payload is the document value itself
            loc = loc[1:]
        elif loc and loc[0] in model.model_fields:
            field = model.model_fields[loc[0]]
            loc = (field.alias or loc[0],) + tuple(loc[1:])
        for part in loc:
            path = index_path(path, part) if isinstance(part, int) else join_path(path, str(part))
        return path
