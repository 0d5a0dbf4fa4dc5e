"""Schema model for devcontainer.json documents."""

from .base import CapturingEntity, Entity, Variant
from .container import EntitySet, define_entities
from .variants import (
    BuildPath,
    CommandArgs,
    CommandMap,
    CommandSpec,
    CommandString,
    ComposeFile,
    ComposeFileList,
    ComposeFilePath,
    MountString,
    PortMapping,
    PortNumber,
    PortSpec,
    ShutdownAction,
)

__all__ = [
    'Entity',
    'CapturingEntity',
    'Variant',
    'EntitySet',
    'define_entities',
    'BuildPath',
    'CommandSpec',
    'CommandString',
    'CommandArgs',
    'CommandMap',
    'ComposeFile',
    'ComposeFilePath',
    'ComposeFileList',
    'MountString',
    'PortSpec',
    'PortNumber',
    'PortMapping',
    'ShutdownAction',
]
