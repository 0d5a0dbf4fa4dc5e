"""Main CLI entry point for devcontainers."""

import logging

import click

from .commands.check import check
from .commands.format import format_file
from .commands.init import init
from .commands.show import show


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """devcontainers - Check, format and inspect devcontainer.json files"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )


# Register commands
cli.add_command(check)
cli.add_command(format_file, name='format')
cli.add_command(show)
cli.add_command(init)


if __name__ == '__main__':
    cli()
