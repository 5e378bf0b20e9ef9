"""Detection of files shadowed by earlier path directories.

Name lookup walks a search path left to right and stops at the first
directory providing the name. A same-named file in any later directory
is therefore unreachable: it is "shadowed" by the earlier one.
"""

import logging
from collections.abc import Iterable, Mapping

from pathctl.core.classify import query_path, status_of
from pathctl.filesystem.base import FileSystem
from pathctl.models.report import ShadowedFile, ShadowGroup
from pathctl.models.segment import Segment, SegmentStatus

logger = logging.getLogger(__name__)


def _list_directory(segment: Segment, fs: FileSystem) -> list[str]:
    """List a directory's entry names, or nothing if it cannot be read."""
    try:
        return sorted(set(fs.list_names(query_path(segment.text))))
    except OSError as exc:
        logger.debug("Cannot list %r, treating as empty: %s", segment.text, exc)
        return []


def find_shadowed(
    segments: Iterable[Segment],
    fs: FileSystem,
    statuses: Mapping[int, SegmentStatus] | None = None,
) -> list[ShadowedFile]:
    """Find every shadowed file in a path.

    Only valid directories take part: a missing entry or a plain file
    neither shadows nor is shadowed. A directory listed twice is still
    scanned at each position, so every file of the repeated entry is
    reported as shadowed by the first one. Each distinct directory is
    read from the filesystem at most once.

    Args:
        segments: Ordered path segments (already filtered/normalized).
        fs: Filesystem to query.
        statuses: Statuses already computed, by segment position.

    Returns:
        Shadowed files in path order, then filename order.
    """
    owners: dict[str, Segment] = {}
    listings: dict[str, list[str]] = {}
    shadowed: list[ShadowedFile] = []

    for segment in segments:
        if status_of(segment, fs, statuses) != SegmentStatus.VALID:
            logger.debug("Skipping invalid directory %r", segment.text)
            continue

        location = query_path(segment.text)
        if location not in listings:
            listings[location] = _list_directory(segment, fs)

        for name in listings[location]:
            owner = owners.get(name)
            if owner is None:
                owners[name] = segment
            else:
                shadowed.append(ShadowedFile(name=name, directory=segment, winner=owner))

    return shadowed


def group_shadowed(shadowed: Iterable[ShadowedFile]) -> list[ShadowGroup]:
    """Group shadowed files by the directory that loses, in path order.

    Within a group, files are sorted by name.
    """
    groups: dict[int, list[ShadowedFile]] = {}
    directories: dict[int, Segment] = {}
    for item in shadowed:
        position = item.directory.position
        directories.setdefault(position, item.directory)
        groups.setdefault(position, []).append(item)

    return [
        ShadowGroup(
            directory=directories[position],
            files=tuple(sorted(groups[position], key=lambda f: f.name)),
        )
        for position in sorted(groups)
    ]
