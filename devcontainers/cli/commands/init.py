"""Init command for devcontainers."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ...models.variants import CommandString, PortNumber
from ..helpers import feature_option, get_schema


@click.command()
@click.option('--name', help='Display name for the dev container')
@click.option('--image', help='Image to create the container from')
@click.option('--remote-user', help='User tools run as inside the container')
@click.option('--forward-port', 'forward_ports', type=click.IntRange(0, 65535), multiple=True,
              help='Port to forward (repeatable)')
@click.option('--post-create', help='Command to run after the container is created')
@click.option('--output', '-o', type=click.Path(path_type=Path),
              help='Write to this file instead of standard output')
@click.option('--force', is_flag=True, help='Overwrite an existing output file')
@feature_option
@click.pass_context
def init(ctx, name, image, remote_user, forward_ports, post_create, output, force, feature_names):
    """Create a new devcontainer.json"""
    schema = get_schema(feature_names)

    container = schema.DevContainer()
    container.name = name
    container.image = image
    container.remote_user = remote_user
    if forward_ports:
        container.forward_ports = [PortNumber(port=port) for port in forward_ports]
    if post_create:
        container.post_create_command = CommandString(value=post_create)

    text = schema.dumps(container) + "\n"
    if output is None:
        click.echo(text, nl=False)
        return

    console = Console()
    if output.exists() and not force:
        console.print(f"[red]✗ {escape(str(output))} already exists (use --force to overwrite)[/red]")
        ctx.exit(1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding='utf-8')
    console.print(f"[green]✓[/green] Created {escape(str(output))}")
