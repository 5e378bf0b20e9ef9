"""Filesystem backend for the real operating system."""

import logging
import os
from pathlib import Path

from pathctl.filesystem.base import FileSystem

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystem):
    """FileSystem implementation backed by ``os`` and ``pathlib``."""

    def exists(self, path: str) -> bool:
        try:
            return Path(path).exists()
        except (OSError, ValueError) as exc:
            logger.debug("Cannot stat %s: %s", path, exc)
            return False

    def is_dir(self, path: str) -> bool:
        try:
            return Path(path).is_dir()
        except (OSError, ValueError) as exc:
            logger.debug("Cannot stat %s: %s", path, exc)
            return False

    def resolve(self, path: str) -> str:
        try:
            return str(Path(path).resolve(strict=False))
        except (RuntimeError, ValueError) as exc:
            # Symlink loops raise RuntimeError on older interpreters;
            # embedded NUL bytes raise ValueError
            raise OSError(f"Cannot resolve {path}: {exc}") from exc

    def list_names(self, path: str) -> list[str]:
        with os.scandir(path) as entries:
            return [entry.name for entry in entries]
