"""Classification, filtering and normalization of path segments.

Every filesystem query made here is absorbed on failure: a segment
that cannot be inspected is reported as missing instead of aborting
the run.
"""

import logging
from collections.abc import Iterable, Mapping
from enum import Enum

from pathctl.filesystem.base import FileSystem
from pathctl.models.segment import Segment, SegmentStatus

logger = logging.getLogger(__name__)


class FilterMode(str, Enum):
    """How segments are filtered before output or analysis.

    Attributes:
        NONE: Keep every segment as given.
        FILTER: Drop segments that are not existing directories.
        NORMALIZE: FILTER, and replace each segment by its resolved path.
    """

    NONE = "none"
    FILTER = "filter"
    NORMALIZE = "normalize"

    @classmethod
    def from_flags(cls, filter_requested: bool, normalize_requested: bool) -> "FilterMode":
        """Pick the mode for a pair of command-line flags.

        Normalization includes filtering, so it wins when both are set.
        """
        if normalize_requested:
            return cls.NORMALIZE
        if filter_requested:
            return cls.FILTER
        return cls.NONE


def query_path(text: str) -> str:
    """Return the filesystem path to query for a segment.

    An empty segment denotes the current directory.
    """
    return text or "."


def classify(text: str, fs: FileSystem) -> SegmentStatus:
    """Classify a segment as valid, missing or not a directory."""
    path = query_path(text)
    try:
        if fs.is_dir(path):
            return SegmentStatus.VALID
        if fs.exists(path):
            return SegmentStatus.NOT_A_DIRECTORY
    except OSError as exc:
        logger.debug("Treating %r as missing: %s", text, exc)
    return SegmentStatus.MISSING


def resolve(text: str, fs: FileSystem) -> str | None:
    """Resolve symbolic links in a segment.

    Returns:
        Absolute resolved path, or None if it cannot be resolved.
    """
    try:
        return fs.resolve(query_path(text))
    except (OSError, ValueError) as exc:
        logger.debug("Cannot resolve %r: %s", text, exc)
        return None


def classify_all(
    segments: Iterable[Segment], fs: FileSystem
) -> list[tuple[Segment, SegmentStatus]]:
    """Classify each segment, preserving order."""
    return [(segment, classify(segment.text, fs)) for segment in segments]


def status_of(
    segment: Segment,
    fs: FileSystem,
    statuses: Mapping[int, SegmentStatus] | None = None,
) -> SegmentStatus:
    """Return a segment's status, preferring one already computed for its position."""
    if statuses is not None and segment.position in statuses:
        return statuses[segment.position]
    return classify(segment.text, fs)


def apply_filter(
    segments: Iterable[Segment],
    mode: FilterMode,
    fs: FileSystem,
    statuses: Mapping[int, SegmentStatus] | None = None,
) -> list[Segment]:
    """Filter (and optionally normalize) segments without reordering them.

    Under NORMALIZE every kept segment's text is replaced by its resolved
    form; a valid segment that cannot be resolved is dropped. Duplicates
    are kept.

    Args:
        segments: Ordered path segments.
        mode: Filtering mode.
        fs: Filesystem to query.
        statuses: Statuses already computed, by segment position. Segments
            without an entry are classified here.

    Returns:
        Ordered list of surviving segments, keeping original positions.
    """
    if mode == FilterMode.NONE:
        return list(segments)

    result: list[Segment] = []
    for segment in segments:
        if status_of(segment, fs, statuses) != SegmentStatus.VALID:
            logger.debug("Dropping invalid directory %r", segment.text)
            continue
        if mode == FilterMode.FILTER:
            result.append(segment)
            continue

        resolved = resolve(segment.text, fs)
        if resolved is None:
            logger.debug("Dropping unresolvable directory %r", segment.text)
            continue
        result.append(Segment(text=resolved, position=segment.position, resolved=resolved))
    return result
