"""Allow running as ``python -m devcontainers``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
