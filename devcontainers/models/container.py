"""Entities of a devcontainer.json document.

The entity classes are defined per :class:`~devcontainers.core.features.Features`
selection: fields of a disabled group do not exist on the classes built for it.
"""

from typing import Any, ClassVar, Dict, List, NamedTuple, Optional, Tuple, Type, Union

from pydantic import Field

from ..core.constants import MAX_PORT
from ..core.features import Features
from .base import CapturingEntity, Entity
from .variants import (
    BuildPath,
    CommandArgs,
    CommandMap,
    CommandString,
    ComposeFileList,
    ComposeFilePath,
    MountString,
    PortMapping,
    PortNumber,
    ShutdownAction,
)


# Union members are listed in match order: the first whose shape fits wins.
CommandField = Optional[Union[CommandMap, CommandArgs, CommandString]]


class EntitySet(NamedTuple):
    """The entity classes built for one feature selection."""

    DevContainer: Type[Entity]
    BuildConfig: Type[Entity]
    PortAttributes: Type[Entity]
    PortObject: Type[Entity]
    MountSpec: Type[Entity]
    VSCodeCustomizations: Optional[Type[Entity]]
    Customizations: Optional[Type[Entity]]


def define_entities(features: Features) -> EntitySet:
    """Define the entity classes for a feature selection."""
    base = CapturingEntity if features.allow_unknown_fields else Entity
    # `features` is also a field of the root entity
    ide_customizations = features.ide_customizations
    compose_integration = features.compose_integration

    class BuildConfig(base):
        """Docker build settings."""

        required_any: ClassVar[Tuple[str, ...]] = ("dockerfile", "context")

        dockerfile: Optional[str] = Field(None, description="Dockerfile path, relative to devcontainer.json")
        context: Optional[str] = Field(None, description="Build context path, relative to devcontainer.json")
        args: Optional[Dict[str, str]] = Field(None, description="Docker build arguments")
        target: Optional[str] = Field(None, description="Target stage of a multi-stage build")
        cache_from: Optional[List[str]] = Field(None, description="Images to use as build caches")

    class PortAttributes(base):
        """Attributes applied to a forwarded port."""

        label: Optional[str] = None
        protocol: Optional[str] = Field(None, description="'http' or 'https'")
        on_auto_forward: Optional[str] = Field(
            None, description="'notify', 'openBrowser', 'openPreview', 'silent' or 'ignore'"
        )
        require_local_port: Optional[bool] = None
        elevate_if_needed: Optional[bool] = None

    class PortObject(base):
        """A forwarded port given as an object."""

        required_keys: ClassVar[Tuple[str, ...]] = ("port",)

        port: int = Field(ge=0, le=MAX_PORT)
        protocol: Optional[str] = None
        label: Optional[str] = None
        on_auto_forward: Optional[str] = None

    class MountSpec(base):
        """A mount given as an object."""

        source: Optional[str] = None
        target: Optional[str] = None
        mount_type: Optional[str] = Field(None, alias="type", description="'bind' or 'volume'")

    VSCodeCustomizations = None
    Customizations = None
    if ide_customizations:

        class VSCodeCustomizations(base):
            """VS Code specific customizations."""

            extensions: Optional[List[str]] = Field(None, description="Extension IDs to install")
            settings: Optional[Dict[str, Any]] = Field(None, description="Default settings.json values")

        class Customizations(Entity):
            """Tool specific customizations, keyed by tool identifier.

            Tools without a typed shape are kept as-is in ``unrecognized``.
            """

            capture_field: ClassVar[Optional[str]] = "unrecognized"

            vscode: Optional[VSCodeCustomizations] = None
            unrecognized: Dict[str, Any] = Field(default_factory=dict, exclude=True)

    class DevContainer(base):
        """Root of a devcontainer.json document."""

        name: Optional[str] = Field(None, description="Display name for the dev container")
        image: Optional[str] = Field(None, description="Image used to create the container")
        docker_file: Optional[str] = Field(None, alias="dockerFile", description="Legacy Dockerfile path")
        build: Optional[Union[BuildConfig, BuildPath]] = None
        features: Optional[Dict[str, Any]] = Field(None, description="Feature reference to feature options")
        forward_ports: Optional[List[Union[PortObject, PortNumber, PortMapping]]] = None
        ports_attributes: Optional[Dict[str, PortAttributes]] = None
        other_ports_attributes: Optional[PortAttributes] = None
        container_env: Optional[Dict[str, str]] = None
        remote_env: Optional[Dict[str, str]] = None
        container_user: Optional[str] = None
        remote_user: Optional[str] = None
        workspace_folder: Optional[str] = None
        workspace_mount: Optional[str] = None
        mounts: Optional[List[Union[MountSpec, MountString]]] = None
        run_args: Optional[List[str]] = None
        init: Optional[bool] = None
        privileged: Optional[bool] = None
        override_command: Optional[bool] = None
        shutdown_action: Optional[ShutdownAction] = None
        initialize_command: CommandField = None
        on_create_command: CommandField = None
        update_content_command: CommandField = None
        post_create_command: CommandField = None
        post_start_command: CommandField = None
        post_attach_command: CommandField = None
        if ide_customizations:
            customizations: Optional[Customizations] = None
            extensions: Optional[List[str]] = Field(None, description="Legacy VS Code extension list")
            settings: Optional[Dict[str, Any]] = Field(None, description="Legacy VS Code settings")
        else:
            customizations: Optional[Dict[str, Any]] = None
        if compose_integration:
            docker_compose_file: Optional[Union[ComposeFileList, ComposeFilePath]] = None
            service: Optional[str] = Field(None, description="Compose service to connect to")
            run_services: Optional[List[str]] = None

    return EntitySet(
        DevContainer=DevContainer,
        BuildConfig=BuildConfig,
        PortAttributes=PortAttributes,
        PortObject=PortObject,
        MountSpec=MountSpec,
        VSCodeCustomizations=VSCodeCustomizations,
        Customizations=Customizations,
    )
