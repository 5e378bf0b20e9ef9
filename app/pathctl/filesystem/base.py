"""Abstract filesystem interface used by the path analysis.

The analysis never touches the disk directly; it asks a FileSystem
for the handful of queries it needs. This keeps the core testable
against an in-memory implementation.
"""

from abc import ABC, abstractmethod


class FileSystem(ABC):
    """Abstract base class for filesystem query backends.

    Implementations may raise OSError from ``resolve`` and
    ``list_names``; callers downgrade such failures to a
    classification value rather than propagating them.

    Example:
        >>> fs = LocalFileSystem()
        >>> if fs.is_dir("/usr/bin"):
        ...     names = fs.list_names("/usr/bin")
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether anything exists at path (following symlinks).

        Returns:
            True if path names an existing entry, False otherwise.
        """

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check whether path names an existing directory (following symlinks).

        Returns:
            True if path is a directory, False otherwise.
        """

    @abstractmethod
    def resolve(self, path: str) -> str:
        """Resolve symbolic links and return the absolute target path.

        The target itself does not have to exist.

        Raises:
            OSError: If resolution fails (e.g. a symlink loop).
        """

    @abstractmethod
    def list_names(self, path: str) -> list[str]:
        """List the names of the immediate entries of a directory.

        Raises:
            OSError: If the directory cannot be read.
        """
