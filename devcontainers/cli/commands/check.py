"""Check command for devcontainers."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ...core.exceptions import DevContainerError
from ...utils.file_finder import DevContainerFinder
from ..helpers import feature_option, get_schema


@click.command()
@click.argument('target', type=click.Path(path_type=Path), default='.')
@feature_option
@click.pass_context
def check(ctx, target, feature_names):
    """Check that devcontainer.json files fit the schema

    TARGET is a devcontainer.json file or a project directory (default: .).
    In a project directory every configuration is checked, including named
    ones such as .devcontainer/python/devcontainer.json.
    """
    console = Console()
    schema = get_schema(feature_names)

    try:
        paths = DevContainerFinder.resolve_all(target)
    except DevContainerError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        ctx.exit(1)

    failed = 0
    for path in paths:
        try:
            schema.decode(DevContainerFinder.read_document(path))
        except DevContainerError as e:
            console.print(f"[red]✗ {escape(str(path))}: {escape(str(e))}[/red]")
            failed += 1
            continue
        console.print(f"[green]✓[/green] {escape(str(path))} is valid")

    if failed:
        ctx.exit(1)
