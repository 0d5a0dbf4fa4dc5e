"""devcontainers - Typed models for devcontainer.json documents."""

__version__ = "0.1.0"

from .core.document import ObjectPairs
from .core.exceptions import (
    DecodeError,
    DevContainerError,
    DocumentSyntaxError,
    DocumentReadError,
    DuplicateKeyError,
    MissingFieldError,
    NoMatchingVariantError,
    TypeMismatchError,
    UnknownFieldError,
)
from .core.features import Features
from .core.schema import Schema, build_schema, default_schema
from .models.variants import (
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

# Built once at import; DEVCONTAINERS_FEATURES selects the optional field groups
schema = default_schema()

DevContainer = schema.DevContainer
BuildConfig = schema.BuildConfig
PortAttributes = schema.PortAttributes
PortObject = schema.PortObject
MountSpec = schema.MountSpec
VSCodeCustomizations = schema.VSCodeCustomizations
Customizations = schema.Customizations

decode = schema.decode
encode = schema.encode
loads = schema.loads
dumps = schema.dumps

__all__ = [
    'schema',
    'Schema',
    'Features',
    'build_schema',
    'default_schema',
    'decode',
    'encode',
    'loads',
    'dumps',
    'ObjectPairs',
    'DevContainer',
    'BuildConfig',
    'PortAttributes',
    'PortObject',
    'MountSpec',
    'VSCodeCustomizations',
    'Customizations',
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
    'DevContainerError',
    'DocumentSyntaxError',
    'DocumentReadError',
    'DecodeError',
    'TypeMismatchError',
    'MissingFieldError',
    'NoMatchingVariantError',
    'UnknownFieldError',
    'DuplicateKeyError',
]
