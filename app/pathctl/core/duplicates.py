"""Duplicate directory detection."""

from collections.abc import Iterable

from pathctl.models.report import DuplicateEntry, PathReport
from pathctl.models.segment import Segment


def find_duplicates(segments: Iterable[Segment]) -> dict[int, int]:
    """Map each duplicate segment's position to its first occurrence.

    Segments are compared by their normalized key (the resolved form when
    present, otherwise the text). A repeated entry is always attributed to
    the earliest segment with the same key.

    Args:
        segments: Ordered path segments.

    Returns:
        Mapping of duplicate position to the position of the first occurrence.
    """
    return {dup.segment.position: dup.first.position for dup in duplicate_entries(segments)}


def duplicate_entries(segments: Iterable[Segment]) -> list[DuplicateEntry]:
    """List every duplicate segment with the segment it repeats, in path order."""
    first_seen: dict[str, Segment] = {}
    duplicates: list[DuplicateEntry] = []
    for segment in segments:
        first = first_seen.get(segment.key)
        if first is None:
            first_seen[segment.key] = segment
        else:
            duplicates.append(DuplicateEntry(segment=segment, first=first))
    return duplicates


def duplicate_dirs(segments: Iterable[Segment]) -> list[str]:
    """Distinct duplicated directories, each reported once."""
    return PathReport(duplicates=duplicate_entries(segments)).duplicate_dirs
