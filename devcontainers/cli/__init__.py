"""Command line interface for devcontainers."""
