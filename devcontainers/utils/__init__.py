"""Utilities for devcontainers."""

from .file_finder import DevContainerFinder

__all__ = [
    'DevContainerFinder'
]
