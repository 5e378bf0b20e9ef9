"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules, including
an in-memory FileSystem so the path analysis can be tested without
touching the disk.
"""

import posixpath
from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest

from pathctl.filesystem.base import FileSystem


class MemoryFileSystem(FileSystem):
    """In-memory FileSystem fake.

    Args:
        dirs: Directory path -> names of its entries.
        files: Paths of regular (non-directory) files.
        links: Symlink path -> target path (absolute or relative to the link).
        unreadable: Directories whose listing raises PermissionError.
        cwd: Directory that relative paths (and empty segments) refer to.
    """

    def __init__(
        self,
        dirs: dict[str, Iterable[str]] | None = None,
        *,
        files: Iterable[str] = (),
        links: dict[str, str] | None = None,
        unreadable: Iterable[str] = (),
        cwd: str = "/work",
    ) -> None:
        self.dirs = {path: list(names) for path, names in (dirs or {}).items()}
        self.files = set(files)
        self.links = dict(links or {})
        self.unreadable = set(unreadable)
        self.cwd = cwd
        self.listed: list[str] = []

    def _absolute(self, path: str) -> str:
        return posixpath.normpath(posixpath.join(self.cwd, path))

    def _follow(self, path: str) -> str:
        current = self._absolute(path)
        for _ in range(40):
            if current not in self.links:
                return current
            target = self.links[current]
            current = posixpath.normpath(posixpath.join(posixpath.dirname(current), target))
        raise OSError(f"Too many levels of symbolic links: {path}")

    def exists(self, path: str) -> bool:
        target = self._follow(path)
        return target in self.dirs or target in self.files

    def is_dir(self, path: str) -> bool:
        return self._follow(path) in self.dirs

    def resolve(self, path: str) -> str:
        return self._follow(path)

    def list_names(self, path: str) -> list[str]:
        target = self._follow(path)
        self.listed.append(target)
        if target in self.unreadable:
            raise PermissionError(f"Permission denied: {path}")
        if target not in self.dirs:
            raise FileNotFoundError(f"No such directory: {path}")
        return list(self.dirs[target])


@pytest.fixture
def make_fs() -> type[MemoryFileSystem]:
    """Factory for custom in-memory filesystems."""
    return MemoryFileSystem


@pytest.fixture
def memfs() -> MemoryFileSystem:
    """A small system-like tree.

    /bin and /sbin both provide ``ls``; /usr/bin is reachable through the
    /bin-link symlink; /etc/passwd is a plain file; /gone-link dangles.
    """
    return MemoryFileSystem(
        {
            "/bin": ["ls", "cat", "sh"],
            "/sbin": ["ls", "reboot"],
            "/usr/bin": ["python3", "cat"],
            "/usr/local/bin": ["tool"],
            "/empty": [],
            "/work": ["script"],
        },
        files={"/etc/passwd"},
        links={"/bin-link": "/usr/bin", "/gone-link": "/nowhere"},
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    yield config_home


@pytest.fixture
def path_tree(tmp_path: Path) -> Path:
    """A real directory tree for end-to-end tests.

    Layout::

        a/keepme.txt
        b/keepme.txt, b/x
        c/x, c/only-c
        la -> a        (symlink)
        broken -> zzz  (dangling symlink)
        plain.txt      (regular file)
    """
    root = tmp_path / "tree"
    for name in ("a", "b", "c"):
        (root / name).mkdir(parents=True)
    (root / "a" / "keepme.txt").write_text("a")
    (root / "b" / "keepme.txt").write_text("b")
    (root / "b" / "x").write_text("b")
    (root / "c" / "x").write_text("c")
    (root / "c" / "only-c").write_text("c")
    (root / "la").symlink_to(root / "a")
    (root / "broken").symlink_to(root / "zzz")
    (root / "plain.txt").write_text("not a directory")
    return root
