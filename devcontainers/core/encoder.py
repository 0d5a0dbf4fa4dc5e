"""Encoding of schema entities back into document trees."""

from typing import Any, Dict

from ..models.base import Entity


class Encoder:
    """Produces canonical document trees from entities.

    Known fields come out in declared order and absent ones are omitted.
    Free-form mappings are emitted with sorted keys. Captured unknown fields
    follow the known ones, verbatim and in the order they were first seen.
    The ordering rules live in the entities' serializers, so ``model_dump``
    with the same options gives the same tree.
    """

    def encode(self, entity: Entity) -> Dict[str, Any]:
        return entity.model_dump(mode="json", by_alias=True, exclude_none=True)
