"""CLI Helper Functions for devcontainers.

This module provides reusable helper functions for CLI commands to keep
file loading, schema selection and output formatting consistent across
commands.
"""

from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import click
from tabulate import tabulate

from devcontainers.core.constants import FEATURE_NAMES
from devcontainers.core.features import Features
from devcontainers.core.schema import Schema, build_schema, default_schema
from devcontainers.models.base import Entity
from devcontainers.models.variants import (
    BuildPath,
    CommandArgs,
    CommandMap,
    CommandString,
    PortMapping,
    PortNumber,
)
from devcontainers.utils.file_finder import DevContainerFinder

LIFECYCLE_FIELDS = [
    ("initializeCommand", "initialize_command"),
    ("onCreateCommand", "on_create_command"),
    ("updateContentCommand", "update_content_command"),
    ("postCreateCommand", "post_create_command"),
    ("postStartCommand", "post_start_command"),
    ("postAttachCommand", "post_attach_command"),
]


def feature_option(command):
    """Add the repeatable --feature option selecting optional field groups."""
    return click.option(
        '--feature', 'feature_names',
        multiple=True,
        type=click.Choice(FEATURE_NAMES),
        help='Enable an optional field group (defaults to DEVCONTAINERS_FEATURES)'
    )(command)


def get_schema(feature_names: Sequence[str]) -> Schema:
    """Get the schema for the --feature options given, or the default one."""
    if feature_names:
        return build_schema(Features.from_names(feature_names))
    return default_schema()


def load_devcontainer(target: Path, schema: Schema) -> Tuple[Path, Entity]:
    """Locate, read and decode a devcontainer.json.

    Args:
        target: A devcontainer.json file or a project directory
        schema: Schema to decode with

    Returns:
        Tuple of (path, container)

    Raises:
        DevContainerError: If no file is found or it does not decode
    """
    path = DevContainerFinder.resolve(target)
    document = DevContainerFinder.read_document(path)
    return path, schema.decode(document)


def describe_command(command: Any) -> str:
    """Render a lifecycle command for display."""
    if isinstance(command, CommandString):
        return command.value
    if isinstance(command, CommandArgs):
        return " ".join(command.args)
    if isinstance(command, CommandMap):
        return "; ".join(f"{name}: {line}" for name, line in sorted(command.commands.items()))
    return str(command)


def describe_build(container: Entity) -> Optional[str]:
    """Render the build source of a container, if any."""
    build = container.build
    if build is None:
        return container.docker_file
    if isinstance(build, BuildPath):
        return build.dockerfile
    parts = [build.dockerfile or "Dockerfile"]
    if build.context:
        parts.append(f"context {build.context}")
    if build.target:
        parts.append(f"target {build.target}")
    return ", ".join(parts)


def port_id(port: Any) -> str:
    """Get the portsAttributes key a forwarded port is listed under."""
    if isinstance(port, PortNumber):
        return str(port.port)
    if isinstance(port, PortMapping):
        return port.mapping
    return str(port.port)


def port_rows(container: Entity) -> List[List[str]]:
    """Build table rows for the forwarded ports of a container."""
    attributes = container.ports_attributes or {}
    rows = []
    for port in container.forward_ports or []:
        key = port_id(port)
        label = getattr(port, "label", None)
        on_auto_forward = getattr(port, "on_auto_forward", None)
        if key in attributes:
            label = label or attributes[key].label
            on_auto_forward = on_auto_forward or attributes[key].on_auto_forward
        rows.append([key, label or "", on_auto_forward or ""])
    return rows


def lifecycle_rows(container: Entity) -> List[List[str]]:
    """Build table rows for the lifecycle commands set on a container."""
    rows = []
    for key, attr in LIFECYCLE_FIELDS:
        command = getattr(container, attr)
        if command is not None:
            rows.append([key, describe_command(command)])
    return rows


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)
