"""Full path analysis: invalid entries, duplicates and shadowed files."""

import logging

from pathctl.core.classify import FilterMode, apply_filter, classify_all
from pathctl.core.duplicates import duplicate_entries
from pathctl.core.pathlist import DEFAULT_DELIMITER, split, to_segments
from pathctl.core.shadow import find_shadowed, group_shadowed
from pathctl.filesystem.base import FileSystem
from pathctl.models.report import InvalidEntry, PathReport
from pathctl.models.segment import SegmentStatus

logger = logging.getLogger(__name__)


def analyze_path(
    raw: str,
    fs: FileSystem,
    *,
    mode: FilterMode = FilterMode.NONE,
    delimiter: str = DEFAULT_DELIMITER,
) -> PathReport:
    """Analyze a delimited path string.

    Invalid directories are taken from the path exactly as given.
    Duplicates and shadowed files are computed on the path after
    filtering/normalization, so with normalization two spellings of the
    same directory count as duplicates.

    Args:
        raw: Delimited path string.
        fs: Filesystem to query.
        mode: Filtering applied before duplicate and shadow detection.
        delimiter: Path separator.

    Returns:
        PathReport with all three sections populated.
    """
    segments = to_segments(split(raw, delimiter))
    logger.debug("Analyzing %d path entries", len(segments))

    classified = classify_all(segments, fs)
    statuses = {segment.position: status for segment, status in classified}
    invalid = [
        InvalidEntry(segment=segment, status=status)
        for segment, status in classified
        if status != SegmentStatus.VALID
    ]

    # Normalization keeps positions, so the statuses still apply afterwards
    effective = apply_filter(segments, mode, fs, statuses)

    return PathReport(
        invalid=invalid,
        duplicates=duplicate_entries(effective),
        shadowed=group_shadowed(find_shadowed(effective, fs, statuses)),
    )
