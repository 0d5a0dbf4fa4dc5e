"""Base classes shared by every schema entity and union variant."""

import copy
import logging
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from ..core.document import has_key, is_object

logger = logging.getLogger(__name__)


class Entity(BaseModel):
    """An object-shaped part of a devcontainer document.

    Field aliases are the document keys (camelCase). Every field is optional
    unless declared without a default; ``required_keys`` must be present for
    the entity to be chosen as a union variant and ``required_any`` lists keys
    of which at least one must be present once decoded.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )

    # Field collecting keys the schema does not recognize, if any
    capture_field: ClassVar[Optional[str]] = None
    required_keys: ClassVar[Tuple[str, ...]] = ()
    required_any: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def matches(cls, node: Any) -> bool:
        """Shape test used when this entity is one variant of a union."""
        return is_object(node) and all(has_key(node, key) for key in cls.required_keys)

    @classmethod
    def document_fields(cls) -> Dict[str, str]:
        """Map each document key to its attribute name, in declared order."""
        return {
            (info.alias or name): name
            for name, info in cls.model_fields.items()
            if name != cls.capture_field
        }

    @model_serializer(mode="wrap")
    def serialize_document(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        """Dump known fields in canonical form, then the captured keys.

        The capture field is declared with ``exclude=True``; its keys are
        appended after the known fields, verbatim and in encounter order.
        """
        data = handler(self)
        fields = self.document_fields()

        for key, attr in fields.items():
            name = key if info.by_alias else attr
            if name in data:
                data[name] = sort_mappings(getattr(self, attr), data[name])

        if self.capture_field is not None:
            for key, value in getattr(self, self.capture_field).items():
                if key in fields or key in data:
                    logger.warning(f"Skipping captured field '{key}' that shadows a known field")
                    continue
                data[key] = copy.deepcopy(value)
        return data


class CapturingEntity(Entity):
    """Entity that keeps unrecognized keys instead of rejecting them."""

    capture_field: ClassVar[Optional[str]] = "additional_fields"

    additional_fields: Dict[str, Any] = Field(
        default_factory=dict,
        exclude=True,
        description="Unrecognized document keys, kept verbatim in encounter order",
    )


class Variant(BaseModel):
    """A non-object alternative of a union field wrapping a single payload.

    Subclasses declare exactly one field holding the payload and implement
    :meth:`matches` as the shape test for the document value. Variants dump
    as their bare payload.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def matches(cls, node: Any) -> bool:
        raise NotImplementedError

    @classmethod
    def payload_field(cls) -> str:
        return next(iter(cls.model_fields))

    @property
    def payload(self) -> Any:
        return getattr(self, self.payload_field())

    @model_serializer
    def serialize_payload(self) -> Any:
        return self.payload


def sort_mappings(value: Any, dumped: Any) -> Any:
    """Order the keys of free-form mappings in an already dumped value.

    ``value`` is the attribute as held by the entity and ``dumped`` its
    serialized form. Nested entities keep their own declared order.
    """
    if isinstance(value, Entity):
        return dumped
    if isinstance(value, Variant):
        return sort_mappings(value.payload, dumped)
    if isinstance(value, Mapping):
        return {key: sort_mappings(value[key], dumped[key]) for key in sorted(value) if key in dumped}
    if isinstance(value, (list, tuple)):
        return [sort_mappings(item, item_dumped) for item, item_dumped in zip(value, dumped)]
    return dumped
