"""Splitting, joining and editing of delimited path strings.

A path string such as ``/usr/bin:/bin`` is handled as an ordered list
of segment strings. Order is significant and is never changed by the
functions in this module; edits only insert new entries at the front
or back.
"""

import os
from collections.abc import Iterable, Sequence

from pathctl.models.segment import Segment

DEFAULT_DELIMITER: str = os.pathsep


def split(raw: str, delimiter: str = DEFAULT_DELIMITER, *, keep_empty: bool = True) -> list[str]:
    """Split a delimited path string into its segments.

    An empty string is an empty path and yields no segments. Otherwise
    empty pieces (leading, trailing or doubled delimiters) are kept,
    since the shell reads them as the current directory, unless
    keep_empty is False.

    Args:
        raw: Delimited path string, e.g. the value of $PATH.
        delimiter: Single-character separator.
        keep_empty: Keep empty segments in the result.

    Returns:
        Ordered list of segment strings.
    """
    if not raw:
        return []
    parts = raw.split(delimiter)
    if keep_empty:
        return parts
    return [part for part in parts if part]


def join(segments: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Join segments into a delimited path string."""
    return delimiter.join(segments)


def to_segments(texts: Iterable[str]) -> list[Segment]:
    """Wrap segment strings with their ordinal position."""
    return [Segment(text=text, position=i) for i, text in enumerate(texts)]


def _expand_arguments(directories: Iterable[str], delimiter: str) -> list[str]:
    """Split each argument on the delimiter and drop empty pieces.

    Arguments may themselves be delimited lists (``/a:/b``).
    """
    expanded: list[str] = []
    for arg in directories:
        expanded.extend(split(arg, delimiter, keep_empty=False))
    return expanded


def _unique(items: Iterable[str], exclude: Iterable[str] = ()) -> list[str]:
    """Keep the first occurrence of each item, skipping excluded ones."""
    seen = set(exclude)
    result: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def new_path(directories: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Build a fresh path from directories, keeping first occurrences in order."""
    return _unique(_expand_arguments(directories, delimiter))


def add_path(
    current: Sequence[str],
    directories: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
) -> list[str]:
    """Prepend directories to a path.

    Incoming directories already present in current are dropped, so
    adding an existing entry leaves the path unchanged. The existing
    entries are kept exactly as given.

    Args:
        current: Existing path segments.
        directories: Directories to put in front (may be delimited lists).
        delimiter: Separator used to split the directory arguments.

    Returns:
        New list of path segments.
    """
    incoming = _unique(_expand_arguments(directories, delimiter), exclude=current)
    return [*incoming, *current]


def append_path(
    current: Sequence[str],
    directories: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
) -> list[str]:
    """Append directories to a path, skipping ones already present.

    See add_path() for the deduplication rules.
    """
    incoming = _unique(_expand_arguments(directories, delimiter), exclude=current)
    return [*current, *incoming]
