"""Utilities for locating and reading devcontainer.json files."""

import logging
from pathlib import Path
from typing import Any, List, Optional

from ..core.constants import DEVCONTAINER_DIR_NAME, DEVCONTAINER_FILE_NAME, DEVCONTAINER_PATHS
from ..core.document import loads
from ..core.exceptions import DevContainerFileNotFoundError, DocumentReadError

logger = logging.getLogger(__name__)


class DevContainerFinder:
    """Utility class for finding devcontainer.json files in a project."""

    @staticmethod
    def find(project_root: Path) -> Optional[Path]:
        """Find the primary devcontainer.json of a project."""
        for relative_path in DEVCONTAINER_PATHS:
            path = project_root / relative_path
            if path.is_file():
                return path
        return None

    @staticmethod
    def find_all(project_root: Path) -> List[Path]:
        """Find every devcontainer.json, including named configurations.

        Named configurations live one level down, e.g.
        ``.devcontainer/python/devcontainer.json``.
        """
        found = []
        primary = DevContainerFinder.find(project_root)
        if primary:
            found.append(primary)
        config_dir = project_root / DEVCONTAINER_DIR_NAME
        if config_dir.is_dir():
            for path in sorted(config_dir.glob(f"*/{DEVCONTAINER_FILE_NAME}")):
                found.append(path)
        return found

    @staticmethod
    def resolve(target: Path) -> Path:
        """Resolve a file or project directory to a devcontainer.json path."""
        if target.is_file():
            return target
        if target.is_dir():
            path = DevContainerFinder.find(target)
            if path:
                return path
        raise DevContainerFileNotFoundError(f"No devcontainer.json found at {target}")

    @staticmethod
    def resolve_all(target: Path) -> List[Path]:
        """Resolve a file to itself, or a project directory to all its configurations."""
        if target.is_file():
            return [target]
        paths = DevContainerFinder.find_all(target) if target.is_dir() else []
        if not paths:
            raise DevContainerFileNotFoundError(f"No devcontainer.json found at {target}")
        return paths

    @staticmethod
    def read_document(path: Path) -> Any:
        """Read a devcontainer.json file into a document tree."""
        logger.debug(f"Reading {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentReadError(f"Cannot read {path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
        except OSError as e:
            raise DocumentReadError(f"Cannot read {path}: {e.strerror or e}") from e
        return loads(text)
