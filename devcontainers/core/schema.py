"""Schemas: entity classes for a feature selection plus their codec."""

import logging
from functools import lru_cache
from typing import Any, Dict

from ..models.base import Entity
from ..models.container import define_entities
from .constants import DEFAULT_INDENT
from .decoder import Decoder
from .document import dumps, loads
from .encoder import Encoder
from .features import Features

logger = logging.getLogger(__name__)


class Schema:
    """Entity classes built for one :class:`Features` selection.

    The classes of a schema never change after it is built. Use
    :func:`build_schema` to get one; schemas are cached per selection.
    """

    def __init__(self, features: Features):
        self.features = features
        self.entities = define_entities(features)
        self.DevContainer = self.entities.DevContainer
        self.BuildConfig = self.entities.BuildConfig
        self.PortAttributes = self.entities.PortAttributes
        self.PortObject = self.entities.PortObject
        self.MountSpec = self.entities.MountSpec
        self.VSCodeCustomizations = self.entities.VSCodeCustomizations
        self.Customizations = self.entities.Customizations
        self._decoder = Decoder()
        self._encoder = Encoder()

    def decode(self, document: Any) -> Entity:
        """Decode a document tree into a DevContainer.

        Raises:
            DecodeError: If the document does not fit the schema
        """
        return self._decoder.decode(self.DevContainer, document)

    def encode(self, entity: Entity) -> Dict[str, Any]:
        """Encode an entity of this schema into a document tree."""
        return self._encoder.encode(entity)

    def loads(self, text: str) -> Entity:
        """Parse and decode devcontainer.json text."""
        return self.decode(loads(text))

    def dumps(self, entity: Entity, indent: int = DEFAULT_INDENT) -> str:
        """Encode an entity and serialise it as JSON text."""
        return dumps(self.encode(entity), indent=indent)

    def __repr__(self) -> str:
        return f"Schema(features={self.features.names()})"


@lru_cache(maxsize=None)
def build_schema(features: Features = Features()) -> Schema:
    """Get the schema for a feature selection."""
    logger.debug(f"Building schema with features: {', '.join(features.names()) or 'none'}")
    return Schema(features)


def default_schema() -> Schema:
    """Get the schema selected by the DEVCONTAINERS_FEATURES environment variable."""
    return build_schema(Features.from_env())
