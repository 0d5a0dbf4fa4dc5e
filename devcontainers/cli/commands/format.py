"""Format command for devcontainers."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ...core.constants import DEFAULT_INDENT
from ...core.exceptions import DevContainerError
from ..helpers import feature_option, get_schema, load_devcontainer


@click.command()
@click.argument('target', type=click.Path(path_type=Path), default='.')
@click.option('--write', '-w', is_flag=True, help='Rewrite the file in place')
@click.option('--indent', type=int, default=DEFAULT_INDENT, show_default=True,
              help='Indentation width')
@feature_option
@click.pass_context
def format_file(ctx, target, write, indent, feature_names):
    """Rewrite a devcontainer.json in canonical key order

    Absent fields are dropped and mappings are sorted by key. Comments are
    not supported in the input.
    """
    console = Console()
    schema = get_schema(feature_names)

    try:
        path, container = load_devcontainer(target, schema)
    except DevContainerError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        ctx.exit(1)

    text = schema.dumps(container, indent=indent) + "\n"
    if not write:
        click.echo(text, nl=False)
        return

    if path.read_text(encoding='utf-8') == text:
        console.print(f"{escape(str(path))} already formatted")
        return
    path.write_text(text, encoding='utf-8')
    console.print(f"[green]✓[/green] Formatted {escape(str(path))}")
