"""Core decode/encode functionality for devcontainers."""

from .decoder import Decoder
from .encoder import Encoder
from .features import Features
from .schema import Schema, build_schema, default_schema

__all__ = [
    'Decoder',
    'Encoder',
    'Features',
    'Schema',
    'build_schema',
    'default_schema'
]
