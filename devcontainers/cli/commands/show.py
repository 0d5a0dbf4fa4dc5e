"""Show command for devcontainers."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.exceptions import DevContainerError
from ..helpers import (
    describe_build,
    feature_option,
    get_schema,
    lifecycle_rows,
    load_devcontainer,
    port_rows,
    print_table,
)


@click.command()
@click.argument('target', type=click.Path(path_type=Path), default='.')
@feature_option
@click.pass_context
def show(ctx, target, feature_names):
    """Summarize a devcontainer.json"""
    console = Console()
    schema = get_schema(feature_names)

    try:
        path, container = load_devcontainer(target, schema)
    except DevContainerError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        ctx.exit(1)

    table = Table(title=escape(container.name or str(path)))
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    settings = [
        ("Image", container.image),
        ("Build", describe_build(container)),
        ("Remote user", container.remote_user),
        ("Workspace folder", container.workspace_folder),
    ]
    if container.features:
        settings.append(("Features", ", ".join(sorted(container.features))))
    if container.container_env:
        settings.append(("Container env", ", ".join(sorted(container.container_env))))
    if container.mounts:
        settings.append(("Mounts", str(len(container.mounts))))
    if container.shutdown_action is not None:
        settings.append(("Shutdown action", container.shutdown_action.value))

    for label, value in settings:
        if value:
            table.add_row(label, escape(value))
    console.print(table)

    ports = port_rows(container)
    if ports:
        click.echo()
        print_table(["Port", "Label", "On auto forward"], ports)

    commands = lifecycle_rows(container)
    if commands:
        click.echo()
        print_table(["Lifecycle", "Command"], commands)
