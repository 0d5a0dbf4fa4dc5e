"""CLI commands for devcontainers."""
