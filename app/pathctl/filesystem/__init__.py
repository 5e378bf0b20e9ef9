"""Filesystem query backends for path analysis."""

from pathctl.filesystem.base import FileSystem
from pathctl.filesystem.local import LocalFileSystem

__all__ = [
    "FileSystem",
    "LocalFileSystem",
]
