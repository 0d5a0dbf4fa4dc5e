"""Union variants for fields that accept several document shapes.

Variants of one field share a family base class (``CommandSpec``,
``PortSpec``, ...). Callers dispatching with ``isinstance`` should keep a
fallback branch for the family base, since new variants may be added.
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import Field

from ..core.constants import MAX_PORT
from ..core.document import is_array, is_object
from .base import Variant


class CommandSpec(Variant):
    """A lifecycle command (postCreateCommand, postStartCommand, ...)."""


class CommandString(CommandSpec):
    """A single command line run through a shell."""

    value: str

    @classmethod
    def matches(cls, node: Any) -> bool:
        return isinstance(node, str)


class CommandArgs(CommandSpec):
    """An executable followed by its arguments, run without a shell."""

    args: List[str]

    @classmethod
    def matches(cls, node: Any) -> bool:
        return is_array(node)


class CommandMap(CommandSpec):
    """Named commands run in parallel."""

    commands: Dict[str, str]

    @classmethod
    def matches(cls, node: Any) -> bool:
        return is_object(node)


class BuildPath(Variant):
    """A build given as a bare Dockerfile path."""

    dockerfile: str

    @classmethod
    def matches(cls, node: Any) -> bool:
        return isinstance(node, str)


class PortSpec(Variant):
    """A forwarded port given as a bare number or string."""


class PortNumber(PortSpec):
    port: int = Field(ge=0, le=MAX_PORT)

    @classmethod
    def matches(cls, node: Any) -> bool:
        return (
            isinstance(node, int)
            and not isinstance(node, bool)
            and 0 <= node <= MAX_PORT
        )


class PortMapping(PortSpec):
    """A "host:port" string, e.g. ``"db:5432"``."""

    mapping: str

    @classmethod
    def matches(cls, node: Any) -> bool:
        return isinstance(node, str)


class MountString(Variant):
    """A mount in Docker ``--mount`` flag syntax."""

    spec: str

    @classmethod
    def matches(cls, node: Any) -> bool:
        return isinstance(node, str)


class ComposeFile(Variant):
    """Docker Compose file reference(s), relative to devcontainer.json."""


class ComposeFilePath(ComposeFile):
    path: str

    @classmethod
    def matches(cls, node: Any) -> bool:
        return isinstance(node, str)


class ComposeFileList(ComposeFile):
    paths: List[str]

    @classmethod
    def matches(cls, node: Any) -> bool:
        return is_array(node)


class ShutdownAction(str, Enum):
    """What to do with the container when the tool closes the window."""

    NONE = "none"
    STOP_CONTAINER = "stopContainer"
    STOP_COMPOSE = "stopCompose"
